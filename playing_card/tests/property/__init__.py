"""
Property Tests - 性质测试

基于hypothesis的性质测试，验证牌型评估的数学不变量：
排列不变性、最大性、牌型顺序决定比较结果等.
"""
