"""
Integration Tests - End-to-end query runs over the sample record set.
"""
