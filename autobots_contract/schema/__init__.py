"""JSON Schema documents for contract files.

One directory per supported schema revision, one ``<entity>.json`` file per
document kind.
"""
