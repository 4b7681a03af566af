"""混合中英文分词：停用词替换 + 三状态有限状态机。

状态转移表（c 为当前字符，b 为缓冲区）：

    状态          | 汉字                      | 英文字母            | 其他
    NONE         | -> BIGRAM(c)              | -> WORD(c)          | NONE
    BIGRAM(b)    | 完整则输出b; -> BIGRAM(末2字) | 完整则输出b; -> WORD(c) | 完整则输出b; -> NONE
    WORD(b)      | 输出b; -> BIGRAM(c)        | -> WORD(b+c)        | 输出b; -> NONE
"""
import logging
from typing import List, Optional

import regex

from chat_analyzer.analyzer_enums import CharClass, TokenizerState, TokenType
from chat_analyzer.analyzer_models import AliasRegistry, Token

logger = logging.getLogger(__name__)

# 导出文本中的固定占位符
PLACEHOLDER_STOP_WORDS = ("[图片]", "[表情]")
# 追加在文本末尾，用于冲刷最后一个未完成的分词
TERMINATOR = "\0"

_HAN_PATTERN = regex.compile(r"\p{Script=Han}")
_LATIN_PATTERN = regex.compile(r"[a-zA-Z]")


def classify_char(char: str) -> CharClass:
    """字符分类：汉字 / ASCII 英文字母 / 其他"""
    if _HAN_PATTERN.match(char):
        return CharClass.HAN
    if _LATIN_PATTERN.match(char):
        return CharClass.LATIN
    return CharClass.OTHER


def build_stop_words(aliases: AliasRegistry) -> List[str]:
    """停用词 = 占位符 ∪ {'@' + 所有出现过的昵称}，按长度降序（同长度保持首次出现顺序）"""
    stop_words = dict.fromkeys(PLACEHOLDER_STOP_WORDS)
    for names in aliases.values():
        for name in names:
            stop_words.setdefault("@" + name)
    # 先替换长的（有些昵称是别人昵称的前缀）
    return sorted(stop_words, key=len, reverse=True)


def strip_stop_words(text: str, aliases: AliasRegistry) -> str:
    for stop_word in build_stop_words(aliases):
        text = text.replace(stop_word, " ")
    return text


class Tokenizer:
    """逐字符驱动的分词状态机（每次 tokenize 从空闲状态开始，结果立即物化为列表）"""

    def __init__(self):
        self._reset()

    def _reset(self) -> None:
        self._state = TokenizerState.NONE
        self._buffer = ""
        self._tokens: List[Token] = []

    def _emit(self) -> None:
        """输出当前缓冲区：二元组需满2字，英文无条件输出"""
        if self._state == TokenizerState.BIGRAM:
            token = Token(TokenType.BIGRAM, self._buffer)
        elif self._state == TokenizerState.WORD:
            token = Token(TokenType.ENGLISH, self._buffer)
        else:
            return
        if token.is_complete():
            self._tokens.append(token)

    def _enter(self, state: TokenizerState, buffer: str = "") -> None:
        self._state = state
        self._buffer = buffer.lower() if state == TokenizerState.WORD else buffer

    def feed(self, char: str) -> None:
        """处理一个字符（按状态转移表）"""
        match (self._state, classify_char(char)):
            case (TokenizerState.NONE, CharClass.HAN):
                self._enter(TokenizerState.BIGRAM, char)
            case (TokenizerState.NONE, CharClass.LATIN):
                self._enter(TokenizerState.WORD, char)
            case (TokenizerState.NONE, CharClass.OTHER):
                pass

            case (TokenizerState.BIGRAM, CharClass.HAN):
                self._emit()
                self._enter(TokenizerState.BIGRAM, (self._buffer + char)[-2:])
            case (TokenizerState.BIGRAM, CharClass.LATIN):
                self._emit()
                self._enter(TokenizerState.WORD, char)
            case (TokenizerState.BIGRAM, CharClass.OTHER):
                self._emit()
                self._enter(TokenizerState.NONE)

            case (TokenizerState.WORD, CharClass.HAN):
                self._emit()
                self._enter(TokenizerState.BIGRAM, char)
            case (TokenizerState.WORD, CharClass.LATIN):
                self._enter(TokenizerState.WORD, self._buffer + char)
            case (TokenizerState.WORD, CharClass.OTHER):
                self._emit()
                self._enter(TokenizerState.NONE)

    def tokenize(self, text: str) -> List[Token]:
        self._reset()
        for char in text + TERMINATOR:
            self.feed(char)
        return self._tokens


def string_to_tokens(text: str, aliases: Optional[AliasRegistry] = None) -> List[Token]:
    """
    将一行正文转换为分词列表
    :param text: 原始正文
    :param aliases: 当前别名表快照（用于去除 @昵称 提及）
    :return: 按输出顺序排列的分词列表
    """
    cleaned = strip_stop_words(text, aliases or {})
    tokens = Tokenizer().tokenize(cleaned)
    logger.debug("分词完成：%r -> %d 个分词", text, len(tokens))
    return tokens
