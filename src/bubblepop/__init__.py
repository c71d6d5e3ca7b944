"""Bubble Pop: click connected groups of same-colored bubbles to pop them."""
