CRAWLER_MARKERS = (
    "bot",
    "crawler",
    "spider",
    "facebookexternalhit",
    "twitterbot",
    "whatsapp",
    "telegrambot",
    "slackbot",
    "linkedinbot",
)


def is_crawler(user_agent: str | None) -> bool:
    ua = (user_agent or "").lower()
    return any(marker in ua for marker in CRAWLER_MARKERS)
