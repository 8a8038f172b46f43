from pathlib import Path
import os

from dotenv import load_dotenv

# 从 .env 文件读取环境变量（如果存在），已设置的环境变量优先
load_dotenv()


def _env_flag(name, default):
    value = os.getenv(name)
    if value is None or value.strip() == '':
        return default
    return value.strip().lower() not in ('0', 'false', 'no', 'off')


# 日志配置
LOG_LEVEL = os.getenv('UID_LOG_LEVEL', 'INFO').upper()
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DIR = Path(os.environ['UID_LOG_DIR']) if os.getenv('UID_LOG_DIR') else None
LOG_BACKUP_COUNT = int(os.getenv('UID_LOG_BACKUP_COUNT', '7'))

# 翻译器配置
# 为 True 时维护 key -> Uid 反向索引（O(1) 查找），否则线性扫描
REVERSE_INDEX_ENABLED = _env_flag('UID_REVERSE_INDEX', True)

# render() 输出中各条目之间的分隔符
RENDER_SEPARATOR = ', '
