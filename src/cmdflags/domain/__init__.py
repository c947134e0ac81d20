"""Domain layer - value kinds, typed values and the error taxonomy.

This layer contains:
- types: FlagKind and TypedValue
- errors: ProgramError and its subclasses

The domain layer has NO dependencies on the core layer.
"""
