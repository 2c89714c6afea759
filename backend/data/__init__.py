# data/__init__.py
"""data 패키지: 정적 카탈로그 데이터"""
