# -*- coding: utf-8 -*-
"""ローカル検証用の HTTP API（FastAPI）です。"""
