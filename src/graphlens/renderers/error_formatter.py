# src/graphlens/renderers/error_formatter.py
"""
將佈局引擎的錯誤訊息與帶行號的 DOT 原始碼組合成可讀的診斷文字。
"""


def _split_lines(text: str) -> list[str]:
    """
    只以 `\\n` (或 `\\r\\n`) 分行，與 Graphviz 回報行號的方式一致。

    `str.splitlines()` 也會在 `\\x0c`、`\\u2028` 等字元處分行，標籤中出現這些字元時行號會錯位。
    """
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def format_error(descriptor: str, engine_error: str) -> str:
    """
    組合引擎錯誤訊息與逐行編號的 DOT 原始碼。

    Args:
        descriptor: 交給引擎的 DOT 原始碼。
        engine_error: 引擎輸出到標準錯誤的文字。

    Returns:
        以 `engine_error` 開頭、接著換行，之後每一行為 `"{行號:3d}: {內容}"` 的字串。
        行號從 1 開始。
    """
    numbered = "".join(f"{idx:3d}: {line}\n" for idx, line in enumerate(_split_lines(descriptor), start=1))
    return f"{engine_error}\n{numbered}"
