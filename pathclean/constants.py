"""集中维护 pathclean 的词法记号与默认配置常量。"""

# 唯一识别的路径分隔符。
SEP = "/"

# 当前目录记号，同时也是空结果的替代输出。
DOT = "."

# bytes 版本使用的分隔符与点号（按 ASCII 码值比较）。
SEP_BYTE = ord(SEP)
DOT_BYTE = ord(DOT)

# 默认日志级别，库默认保持安静。
DEFAULT_LOG_LEVEL = "warning"

# 默认日志文件，None 表示只输出到控制台。
DEFAULT_LOG_FILE = None

# 默认配置文件名，位于当前工作目录。
DEFAULT_CONFIG_FILE = "pathclean.yaml"

# 随仓库提供的示例配置文件名。
SAMPLE_CONFIG_FILE = "pathclean.sample.yaml"

# check 子命令默认只列出需要清理的路径。
DEFAULT_CHECK_SHOW_CLEAN = False

# batch 子命令默认跳过空行。
DEFAULT_BATCH_SKIP_BLANK = True
