"""Throbbers relay: Spotify OAuth relay and vote ledger backend."""
