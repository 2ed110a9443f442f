"""Charon: S3 object notification handler"""
