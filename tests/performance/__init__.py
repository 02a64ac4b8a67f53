"""
Performance Tests.

Concurrency and throughput checks for validation:
    - Parallel validation matches sequential validation
    - Rejections never leak between concurrent callers
"""
