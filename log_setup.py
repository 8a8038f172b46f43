import logging
from logging.handlers import TimedRotatingFileHandler

import config

_configured = False


def setup_logging():
    """设置日志系统（只配置一次根 logger）"""
    global _configured
    logger = logging.getLogger()
    if _configured:
        return logger

    level = getattr(logging, config.LOG_LEVEL, logging.INFO)
    logger.setLevel(level)
    formatter = logging.Formatter(config.LOG_FORMAT)

    # 控制台处理器
    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    # 文件处理器（每天一个日志文件）
    if config.LOG_DIR is not None:
        config.LOG_DIR.mkdir(parents=True, exist_ok=True)
        file_handler = TimedRotatingFileHandler(
            config.LOG_DIR / 'uid_translation.log',
            when='midnight',
            interval=1,
            backupCount=config.LOG_BACKUP_COUNT
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    _configured = True
    logging.info("日志系统初始化完成")
    return logger
