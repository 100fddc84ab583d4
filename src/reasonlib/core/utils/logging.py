"""
Lightweight logging helpers with content-masking defaults.
"""
# 说明：轻量级日志工具，提供节点内容脱敏的默认配置与统一的 logger 获取入口。
# 职责：
# - ContentFilter：根据运行时配置对日志记录中的节点内容字段进行脱敏处理
# - configure_logging(...)：初始化 logging 基本配置并为根 logger 挂载过滤器
# - get_logger(...)：按名称获取 logger，必要时自动完成日志系统初始化并挂载过滤器
# 约定：
# - 是否掩码节点内容由 RuntimeConfig.mask_node_content 控制
# - 日志级别优先级：显式参数 level > 环境变量 REASONLIB_LOG_LEVEL > 运行时配置的 log_level

from __future__ import annotations

import logging
import os
from typing import Optional

from .config import get_config

_MASKED_ATTRIBUTES = ("content", "payload")


class ContentFilter(logging.Filter):
    """Filter that masks node content carried on log records if configured."""
    # 日志过滤器：启用掩码配置时，对约定字段名（content / payload）进行统一脱敏

    def filter(self, record: logging.LogRecord) -> bool:
        config = get_config()
        if not config.mask_node_content:
            return True
        for attr in _MASKED_ATTRIBUTES:
            if hasattr(record, attr):
                setattr(record, attr, "***")
        return True


def _has_content_filter(filterer: logging.Filterer) -> bool:
    return any(isinstance(item, ContentFilter) for item in filterer.filters)


def configure_logging(level: Optional[str] = None) -> None:
    # 初始化根 logger：确定最终日志级别、设置格式，并挂载 ContentFilter
    log_level = level or os.environ.get("REASONLIB_LOG_LEVEL", get_config().log_level)
    logging.basicConfig(
        level=log_level,
        format="[%(levelname)s] %(name)s %(asctime)s | %(message)s",
    )
    root = logging.getLogger()
    if level is not None:
        root.setLevel(log_level)
    if not _has_content_filter(root):
        root.addFilter(ContentFilter())


def get_logger(name: str) -> logging.Logger:
    # 获取指定名称的 logger；根 logger 尚无 handler 时懒加载初始化。
    # 过滤器挂在具名 logger 上：根 logger 的过滤器不会作用于子 logger 传播上来的记录
    logger = logging.getLogger(name)
    if not logging.getLogger().handlers:
        configure_logging()
    if not _has_content_filter(logger):
        logger.addFilter(ContentFilter())
    return logger
