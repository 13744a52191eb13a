"""Wire Schemas: Pydantic models mirroring the external API payloads."""
