"""Payment instruction parsing and processing.

The instruction layer turns a free-text transfer sentence into a strict `ParsedInstruction`, which
is then checked against the caller's account snapshot by the settlement evaluator.
"""
