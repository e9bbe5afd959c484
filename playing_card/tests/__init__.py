"""
Tests Module - 测试框架

Test Categories:
    unit/: 单元测试 - 测试单个模块功能
    property/: 性质测试 - 验证牌型评估的不变量
    anti_cheat/: 反作弊系统 - 确保测试使用真实的核心模块
"""
