"""
소셜 서비스 사용자 계정 데이터 접근 계층
"""
