"""Core storage-backed structures: ordered arrays, lists and the note store."""
