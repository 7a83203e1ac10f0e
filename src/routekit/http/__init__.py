"""Ambient request metadata consumed by the router."""
