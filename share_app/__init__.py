"""Share App - decode a shell payload and hand the files to the OS share facility."""

__version__ = "1.0.0"
