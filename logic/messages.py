"""Localized user-facing strings for fallbacks and notices."""

from __future__ import annotations

from typing import Dict

from models.taxonomy import Language

MESSAGES: Dict[str, Dict[Language, str]] = {
    "analysis_no_key": {
        Language.ZH: "API Key 未配置 (AI 分析不可用)",
        Language.EN: "AI Analysis unavailable (No API Key)",
    },
    "analysis_failed": {
        Language.ZH: "图片分析失败",
        Language.EN: "Failed to analyze image",
    },
    "recommend_no_key": {
        Language.ZH: "API Key 缺失。建议直接穿你最喜欢的牛仔裤和T恤！",
        Language.EN: "API Key missing. Wear your favorite jeans and a t-shirt!",
    },
    "recommend_empty": {
        Language.ZH: "无法生成穿搭建议。",
        Language.EN: "Could not generate outfit.",
    },
    "recommend_offline": {
        Language.ZH: "搭配师目前离线。",
        Language.EN: "Stylist is currently offline.",
    },
    "closet_empty": {
        Language.ZH: "衣橱空空如也，快去添加衣物吧！",
        Language.EN: "Your closet is empty. Add some clothes first!",
    },
    "chat_no_key": {
        Language.ZH: "API Key 缺失。",
        Language.EN: "API Key missing.",
    },
    "chat_image_empty": {
        Language.ZH: "我看不清这张图，能换一张吗？",
        Language.EN: "I can't see the image clearly.",
    },
    "chat_text_empty": {
        Language.ZH: "我暂时想不到什么建议。",
        Language.EN: "I couldn't think of anything.",
    },
    "chat_failed": {
        Language.ZH: "我现在有点混乱，请稍后再试。",
        Language.EN: "I'm having trouble thinking right now.",
    },
    "chat_default_query": {
        Language.ZH: "你觉得这件怎么样？",
        Language.EN: "What do you think about this?",
    },
    "lab_intro": {
        Language.ZH: "你好！我是你的专属 AI 搭配师。想试试“刘雯同款”还是“韩系简约”？告诉我，我来帮你从衣橱里找灵感！",
        Language.EN: "Hi! I'm your AI stylist. Want to try 'Liu Wen style' or 'Korean Minimalist'? Tell me, and I'll search your closet!",
    },
    "new_item_manual": {
        Language.ZH: "新衣物 (AI未识别)",
        Language.EN: "New Item (Unanalyzed)",
    },
    "link_page_url": {
        Language.ZH: "检测到商品页面链接。为了获得最准确的 AI 分析，链接已保存，请上传一张商品详情页的截图。",
        Language.EN: "Product page detected. For best AI analysis, the link has been saved, but please upload a screenshot of the page.",
    },
    "link_image_fetch": {
        Language.ZH: "无法读取图片。请尝试复制图片地址或直接上传截图。",
        Language.EN: "Could not fetch image. Please use \"Copy Image Address\" or upload a screenshot.",
    },
}


def message(key: str, language: Language) -> str:
    """Return the string for ``key`` in ``language``."""

    return MESSAGES[key][language]


__all__ = ["MESSAGES", "message"]
