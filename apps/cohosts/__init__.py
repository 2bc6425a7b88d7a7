"""Co-hosts app package.

A host can delegate part of the work on one listing to another user
through a CohostPermission grant with three independent capabilities
(edit the listing, manage bookings, respond to messages). This app owns
those grants and the authorization resolver that every other app consults
before acting on a listing, booking or conversation.
"""
