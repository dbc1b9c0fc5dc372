# MIT License
# Copyright (c) 2025 Hashborn

"""
Remote chain protocol definitions: store layout constants, address codec,
protobuf messages and typed result models.
"""
