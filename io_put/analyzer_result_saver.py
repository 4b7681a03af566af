import logging
import os
from datetime import datetime

from chat_analyzer.analyzer_models import AnalyzerResult
from configs import AppConfig
from io_put.dataclass_output import DataConverterFacade

logger = logging.getLogger(__name__)


def save_analyzer_result_to_json(analyzer_result: AnalyzerResult, app_config: AppConfig) -> str:
    """
    将分析结果保存为JSON文件

    参数:
        analyzer_result: 分析结果
        app_config: 应用配置对象

    返回:
        str: 保存的文件完整路径
    """
    export_path = app_config.output_config.export_path

    # 文件名格式：导出路径/年-月-日_时-分-秒_chat_analysis.json
    current_time = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
    full_path = os.path.join(export_path, f"{current_time}_chat_analysis.json")

    # 确保输出目录存在
    os.makedirs(export_path, exist_ok=True)

    DataConverterFacade.save_json(analyzer_result, full_path)

    logger.info(f"✅ 分析结果已保存到：{full_path}")

    return full_path


def format_tfidf_report(analyzer_result: AnalyzerResult) -> str:
    """按活跃度顺序输出 `代表昵称: 词1, 词2, ...`，仅包含有TF-IDF结果的身份"""
    if analyzer_result.tfidf is None:
        return ""

    lines = []
    for identity in analyzer_result.ranked_ids:
        if identity not in analyzer_result.tfidf:
            continue
        name = analyzer_result.representative_alias.get(identity, identity)
        lines.append(f"{name}: {', '.join(analyzer_result.top_terms.get(identity, []))}")
    return "\n".join(lines) + ("\n" if lines else "")
