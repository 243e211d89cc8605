"""Lending core: the domain model behind a community item-lending platform."""
