import asyncio
import base64
import hashlib
import logging
from typing import Iterable

from exceptions import HashDigestError

logger = logging.getLogger(__name__)

# 加盐前后缀（固定常量）
SALT_PREFIX = "🐕"
SALT_SUFFIX = "🐶"

# 预先计算好的拉黑摘要：base64(sha256(前缀 + id + 后缀))
BLACK_LIST = frozenset({
    "k9URW8fQMo2wan1I7CmyAxX9RBISFj3xoNtcbLvQk5M=",
})


def _sha256_base64(identity: str) -> str:
    digest = hashlib.sha256((SALT_PREFIX + identity + SALT_SUFFIX).encode("utf-8")).digest()
    return base64.b64encode(digest).decode("ascii")


async def salted_digest(identity: str) -> str:
    """
    计算身份的加盐单向摘要（在线程中执行，调用方逐个await）
    :raise HashDigestError: 摘要计算失败（无法判定是否拉黑，流程必须终止）
    """
    try:
        return await asyncio.to_thread(_sha256_base64, identity)
    except Exception as e:
        raise HashDigestError(identity) from e


async def is_blacklisted(identity: str, extra_digests: Iterable[str] = ()) -> bool:
    """身份摘要是否命中固定黑名单（或配置追加的摘要）"""
    digest = await salted_digest(identity)
    return digest in BLACK_LIST or digest in set(extra_digests)
