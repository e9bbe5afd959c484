"""
UI Module - 用户界面层

只依赖application层和core层，不包含业务逻辑.
"""
