from __future__ import annotations

from mind_dump.models import Category, DEFAULT_CATEGORY

# Evaluated top to bottom, first family with a hit wins.
CATEGORY_RULES: list[tuple[Category, tuple[str, ...]]] = [
    (
        Category.VENTURE,
        ("拉面", "汤底", "高汤", "面条", "店铺", "选址", "租金", "装修",
         "门店", "开店", "创业", "财务", "成本", "利润"),
    ),
    (
        Category.TECH,
        ("react", "javascript", "typescript", "前端", "css", "html", "node",
         "web", "编程", "代码", "教程", "学习", "vite"),
    ),
    (
        Category.WORK,
        ("报告", "邮件", "同事", "会议", "客户", "项目", "排期", "需求",
         "上线", "测试", "bug", "OKR", "周报", "工作"),
    ),
    (
        Category.LIFE,
        ("买", "购买", "购物", "超市", "菜市场", "支付", "家务", "打扫", "整理",
         "洗衣", "做饭", "吃饭", "晚餐", "午餐", "早餐", "外卖", "预约"),
    ),
]

# Families whose keywords match regardless of case; their keywords are lower case.
CASE_INSENSITIVE = frozenset({Category.TECH})


class TaskClassifier:

    def __init__(
        self,
        rules: list[tuple[Category, tuple[str, ...]]] | None = None,
        case_insensitive: frozenset[Category] = CASE_INSENSITIVE,
    ):
        self.rules = rules if rules is not None else CATEGORY_RULES
        self.case_insensitive = case_insensitive

    def classify_one(self, text: str) -> Category:
        folded = text.casefold()
        for category, keywords in self.rules:
            content = folded if category in self.case_insensitive else text
            if any(k in content for k in keywords):
                return category
        return DEFAULT_CATEGORY

    def classify(self, items: list[str]) -> list[Category]:
        return [self.classify_one(item) for item in items]


def classify(text: str) -> Category:
    return TaskClassifier().classify_one(text)
