import asyncio
import logging
import sys

# ====================== 1. 全局日志配置 ======================
from log import setup_global_logging

setup_global_logging()
logger = logging.getLogger(__name__)

# ====================== 2. 导入自定义模块 ======================
# 配置解析相关
from configs import AppConfig, ConfigParser
# 异常相关
from exceptions import ParseBaseError, ChatImportError, AnalyzerBaseException
# 分析器
from chat_analyzer.chat_record_analyzer import ChatRecordAnalyzer
# 结果输出
from io_put import save_analyzer_result_to_json, format_tfidf_report
# 配置加载门面类 + 导出文件读取
from utils import ConfigLoader, read_export_text


# ====================== 3. 核心异步主函数 ======================
async def main(config_path: str = None):
    """程序主入口：读取配置 → 解析 → 读取导出文件 → 分析 → 保存结果"""
    logger.info("===== 聊天记录分析程序启动 =====")

    try:
        # -------------------------- 步骤1：读取+解析配置 --------------------------
        logger.info("【步骤1/4】开始读取并解析配置文件")
        config_dict = ConfigLoader.load_config(config_path)
        app_config: AppConfig = ConfigParser.parse(config_dict)
        logger.info("✅ 所有配置统一解析完成")

        # -------------------------- 步骤2：读取导出文件 --------------------------
        logger.info("【步骤2/4】开始读取聊天记录导出文件")
        text = read_export_text(app_config.input_config.export_path, app_config.input_config.encoding)

        # -------------------------- 步骤3：执行分析 --------------------------
        logger.info("【步骤3/4】开始执行聊天记录分析")
        analyzer = ChatRecordAnalyzer(app_config=app_config)
        analyzer_result = await analyzer.run(text)
        logger.info("✅ 聊天记录分析完成")

        # -------------------------- 步骤4：导出结果 --------------------------
        logger.info("【步骤4/4】开始导出分析结果")
        save_analyzer_result_to_json(analyzer_result, app_config)
        report = format_tfidf_report(analyzer_result)
        if report:
            logger.info(f"【区分性词汇】\n{report}")

    except KeyboardInterrupt:
        logger.info("⚠️ 程序被手动终止")
        sys.exit(1)
    except ParseBaseError as e:
        logger.error(f"【配置解析/读取失败】{e}", exc_info=True)
        sys.exit(1)
    except ChatImportError as e:
        logger.error(f"【聊天记录导入失败】{e}", exc_info=True)
        sys.exit(1)
    except AnalyzerBaseException as e:
        logger.error(f"【分析流程执行失败】{e}", exc_info=True)
        sys.exit(1)
    except Exception as e:
        logger.error(f"【程序执行异常】未知错误：{e}", exc_info=True)
        sys.exit(1)
    finally:
        logger.info("===== 聊天记录分析程序结束 =====")


# ====================== 4. 程序入口 ======================
if __name__ == "__main__":
    asyncio.run(main(sys.argv[1] if len(sys.argv) > 1 else None))
