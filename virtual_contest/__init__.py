"""
가상 콘테스트 매니저
콘테스트 메타데이터, 참가자, 문제 항목의 영속화 계층
"""

__version__ = "0.1.0"
