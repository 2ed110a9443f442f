"""
Lambda Handlers for Charon

サーバレス構成のエントリポイント:
- Object Notification (S3 → HeadObject → Content-Type)
"""
