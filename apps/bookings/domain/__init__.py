"""Pure booking rules: availability, pricing and status transitions."""
