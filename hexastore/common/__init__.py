"""Shared building blocks: exceptions, logging, store ports."""
