"""ECサイトバックエンドのパッケージ."""
from . import domain

# infrastructure は boto3 / pg8000 に依存するため、
# 必要な場所で明示的にインポートする

__all__ = ["domain"]
