"""Core of rwbin: domain models, literal classification and byte encoding.

The core knows nothing about Typer or Rich; file access goes through the
`ByteStore` protocol implemented in `rwbin.adapters`.
"""
