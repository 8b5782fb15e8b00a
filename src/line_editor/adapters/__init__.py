"""Hosts that embed an editing session."""
