"""Adapters layer - concrete implementations of the ports.

Inbound adapters drive the engine (console report, command line).
Outbound adapters supply the record tables.
"""
