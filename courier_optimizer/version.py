"""Calculator version, stamped on batch pipeline output."""

VERSION = "2025.12.1"
