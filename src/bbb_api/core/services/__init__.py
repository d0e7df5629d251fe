"""Orchestration services built on the core components."""
