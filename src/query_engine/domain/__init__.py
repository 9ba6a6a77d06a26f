"""Domain layer for the query engine.

Entities are the immutable records the engine queries; value objects
describe how to order and compare them.
"""
