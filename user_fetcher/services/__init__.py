"""Services Layer: orchestrates cache, transport and retry around core logic."""
