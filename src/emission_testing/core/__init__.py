"""
Core emission compliance testing: models, strategies, the test state
machine, the concurrent runner and the result registry.
"""
