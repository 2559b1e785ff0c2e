"""Settlement evaluation.

Turns a parsed instruction plus the caller's account snapshot into a successful or pending
outcome, or rejects it with a business-rule error.
"""
