from enum import Enum


# 分词结果类型
class TokenType(Enum):
    BIGRAM = (1, "bigram")      # 汉字二元组（滑动窗口）
    ENGLISH = (2, "english")    # 连续英文字母（小写）

    def __repr__(self):
        return self.value[1]


# 分词状态机的状态
class TokenizerState(Enum):
    NONE = "none"           # 空闲
    BIGRAM = "bigram"       # 正在构建汉字二元组
    WORD = "word"           # 正在构建英文单词


# 字符分类
class CharClass(Enum):
    HAN = "han"             # 汉字（Unicode Script=Han）
    LATIN = "latin"         # ASCII 英文字母
    OTHER = "other"         # 其他（含结束符）


# 可启用的统计类型
class StatType(Enum):
    INTERACTION = "interaction"   # 互动关系图
    TFIDF = "tfidf"               # 区分性词汇

    @classmethod
    def values(cls) -> list:
        return [member.value for member in cls]
