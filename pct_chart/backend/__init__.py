"""
FastAPI 后端
"""
