"""Application layer - Use cases and orchestration.

Structure:
- services/: MoneyAccumulator (folds a stream of amounts into one total)
"""
