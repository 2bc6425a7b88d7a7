"""Messaging between guests and hosts about a listing.

One conversation exists per (listing, guest, host) triple and is created
lazily the first time the guest writes. Co-hosts holding
``can_respond_messages`` on the listing can read and answer.
"""
