"""Listings app package.

Holds the Listing model (a rentable place owned by exactly one host), its
public search API and the advisory read-through cache in front of listing
reads.
"""
