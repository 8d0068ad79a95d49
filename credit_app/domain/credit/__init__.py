"""
Credit bounded context — domain layer.

This module contains all domain logic for the credit context:
- Customer registration and identity integrity
- Credit application creation and installment rules
- Credit lookup with ownership checks
"""
