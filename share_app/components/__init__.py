"""Atomic components: args_decode, share, session."""
