"""
Utility modules for the assistant CLI: configuration, logging, input and output formatting.
"""
