"""HR entitlements application package.

Holds the domain entities, use cases, infrastructure adapters and the HTTP
interface. Nothing is re-exported here; the file only makes ``app`` a
regular package so it is never resolved as a namespace package.
"""
