"""
Unit Tests - 单元测试

每个测试都应使用真实的核心对象.
"""
