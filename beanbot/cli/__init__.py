"""Unified command-line interface for beanbot.

Usage:
    beanbot draft '<command>' [--commit] [--no-sync]
    beanbot accounts [query ...]
    beanbot serve
    beanbot --config path/to/bot.toml ...
"""
