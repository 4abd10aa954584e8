"""Email Login Finder: discover webmail/login endpoints for a mail domain."""

__version__ = "1.0.0"
