"""Application – query composition, search and per-entity facades."""
