"""Feature packages: scanning and playlist building."""
