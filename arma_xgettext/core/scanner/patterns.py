"""
文件类型定义

按扩展名识别 Arma 脚本与配置文件。
"""

from typing import Optional

# 扩展名到语言的映射（扩展名为小写，含点号）
EXTENSION_TO_LANGUAGE: dict[str, str] = {
    ".cpp": "arma",
    ".ext": "arma",
    ".fsm": "arma",
    ".hpp": "arma",
    ".inc": "arma",
    ".sqf": "arma",
    ".sqm": "arma",
    ".sqs": "arma",
}


def language_for(file_name: str) -> Optional[str]:
    """根据扩展名返回语言名，不认识的扩展名返回 None"""
    dot = file_name.rfind(".")
    if dot < 0:
        return None
    return EXTENSION_TO_LANGUAGE.get(file_name[dot:].lower())
