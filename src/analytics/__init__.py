"""
Synthetic operand generation and numeric property verification.

Includes seeded random operand tables and checks that the arithmetic
operations satisfy their algebraic identities and IEEE-754 edge cases.
"""
