"""Curated domain knowledge used for heuristic boosting.

Each entry maps a domain to ``(category, content_type, common_intent)``.
Lookups go through ``DomainKnowledge`` which also handles ``www.``/``m.``
prefixes and subdomains of a listed parent.
"""

KNOWN_DOMAINS: dict[str, tuple[str, str, str]] = {
    # Social media & chat
    "facebook.com": ("social", "communication", "navigational"),
    "twitter.com": ("social", "communication", "navigational"),
    "x.com": ("social", "communication", "navigational"),
    "instagram.com": ("social", "communication", "navigational"),
    "linkedin.com": ("social", "communication", "navigational"),
    "reddit.com": ("social", "communication", "informational"),
    "discord.com": ("social", "communication", "navigational"),
    "slack.com": ("work", "communication", "navigational"),
    "whatsapp.com": ("social", "communication", "navigational"),
    "web.whatsapp.com": ("social", "communication", "navigational"),
    "telegram.org": ("social", "communication", "navigational"),
    "web.telegram.org": ("social", "communication", "navigational"),
    "messenger.com": ("social", "communication", "navigational"),
    "mastodon.social": ("social", "communication", "informational"),
    "bsky.app": ("social", "communication", "informational"),
    "threads.net": ("social", "communication", "navigational"),
    "tiktok.com": ("social", "communication", "informational"),
    "pinterest.com": ("social", "content", "informational"),
    "tumblr.com": ("social", "communication", "informational"),
    "quora.com": ("social", "communication", "informational"),
    "zoom.us": ("work", "communication", "navigational"),
    "meet.google.com": ("work", "communication", "navigational"),
    "teams.microsoft.com": ("work", "communication", "navigational"),
    "signal.org": ("social", "communication", "navigational"),
    # Email
    "gmail.com": ("work", "communication", "navigational"),
    "mail.google.com": ("work", "communication", "navigational"),
    "outlook.com": ("work", "communication", "navigational"),
    "outlook.live.com": ("work", "communication", "navigational"),
    "outlook.office.com": ("work", "communication", "navigational"),
    "mail.yahoo.com": ("work", "communication", "navigational"),
    "protonmail.com": ("work", "communication", "navigational"),
    "proton.me": ("work", "communication", "navigational"),
    "fastmail.com": ("work", "communication", "navigational"),
    "icloud.com": ("work", "communication", "navigational"),
    # Search engines
    "google.com": ("tech", "search", "informational"),
    "bing.com": ("tech", "search", "informational"),
    "duckduckgo.com": ("tech", "search", "informational"),
    "yahoo.com": ("tech", "search", "informational"),
    "baidu.com": ("tech", "search", "informational"),
    "yandex.com": ("tech", "search", "informational"),
    "search.brave.com": ("tech", "search", "informational"),
    "ecosia.org": ("tech", "search", "informational"),
    "startpage.com": ("tech", "search", "informational"),
    "qwant.com": ("tech", "search", "informational"),
    "kagi.com": ("tech", "search", "informational"),
    "perplexity.ai": ("tech", "search", "informational"),
    # E-commerce
    "amazon.com": ("shopping", "content", "transactional"),
    "amazon.de": ("shopping", "content", "transactional"),
    "amazon.fr": ("shopping", "content", "transactional"),
    "amazon.co.uk": ("shopping", "content", "transactional"),
    "ebay.com": ("shopping", "content", "transactional"),
    "alibaba.com": ("shopping", "content", "transactional"),
    "aliexpress.com": ("shopping", "content", "transactional"),
    "etsy.com": ("shopping", "content", "transactional"),
    "shopify.com": ("shopping", "content", "transactional"),
    "walmart.com": ("shopping", "content", "transactional"),
    "target.com": ("shopping", "content", "transactional"),
    "bestbuy.com": ("shopping", "content", "transactional"),
    "ikea.com": ("shopping", "content", "transactional"),
    "zalando.com": ("shopping", "content", "transactional"),
    "temu.com": ("shopping", "content", "transactional"),
    "costco.com": ("shopping", "content", "transactional"),
    "homedepot.com": ("shopping", "content", "transactional"),
    "rakuten.com": ("shopping", "content", "transactional"),
    # Tech / developer
    "github.com": ("tech", "content", "informational"),
    "gitlab.com": ("tech", "content", "informational"),
    "bitbucket.org": ("tech", "content", "informational"),
    "stackoverflow.com": ("tech", "content", "informational"),
    "stackexchange.com": ("tech", "content", "informational"),
    "superuser.com": ("tech", "content", "informational"),
    "serverfault.com": ("tech", "content", "informational"),
    "developer.mozilla.org": ("tech", "content", "informational"),
    "mdn.org": ("tech", "content", "informational"),
    "devdocs.io": ("tech", "content", "informational"),
    "medium.com": ("reading", "content", "informational"),
    "substack.com": ("reading", "content", "informational"),
    "dev.to": ("tech", "content", "informational"),
    "hackernews.com": ("tech", "content", "informational"),
    "news.ycombinator.com": ("tech", "content", "informational"),
    "lobste.rs": ("tech", "content", "informational"),
    "npmjs.com": ("tech", "content", "navigational"),
    "pypi.org": ("tech", "content", "navigational"),
    "crates.io": ("tech", "content", "navigational"),
    "hub.docker.com": ("tech", "content", "navigational"),
    "huggingface.co": ("tech", "content", "informational"),
    "kaggle.com": ("tech", "content", "informational"),
    "arxiv.org": ("reading", "content", "informational"),
    "codepen.io": ("tech", "content", "navigational"),
    "jsfiddle.net": ("tech", "content", "navigational"),
    "replit.com": ("tech", "content", "navigational"),
    "vercel.com": ("tech", "content", "navigational"),
    "netlify.com": ("tech", "content", "navigational"),
    "console.aws.amazon.com": ("work", "content", "transactional"),
    "portal.azure.com": ("work", "content", "transactional"),
    "console.cloud.google.com": ("work", "content", "transactional"),
    # Documentation
    "docs.python.org": ("tech", "content", "informational"),
    "readthedocs.io": ("tech", "content", "informational"),
    "readthedocs.org": ("tech", "content", "informational"),
    "nodejs.org": ("tech", "content", "informational"),
    "react.dev": ("tech", "content", "informational"),
    "vuejs.org": ("tech", "content", "informational"),
    "angular.io": ("tech", "content", "informational"),
    "svelte.dev": ("tech", "content", "informational"),
    "rust-lang.org": ("tech", "content", "informational"),
    "go.dev": ("tech", "content", "informational"),
    "docs.rs": ("tech", "content", "informational"),
    "kubernetes.io": ("tech", "content", "informational"),
    "docs.docker.com": ("tech", "content", "informational"),
    "learn.microsoft.com": ("tech", "content", "informational"),
    "w3schools.com": ("tech", "content", "informational"),
    # Video streaming
    "youtube.com": ("videos", "content", "informational"),
    "youtu.be": ("videos", "content", "informational"),
    "netflix.com": ("videos", "content", "transactional"),
    "twitch.tv": ("videos", "content", "informational"),
    "vimeo.com": ("videos", "content", "informational"),
    "dailymotion.com": ("videos", "content", "informational"),
    "primevideo.com": ("videos", "content", "transactional"),
    "disneyplus.com": ("videos", "content", "transactional"),
    "hulu.com": ("videos", "content", "transactional"),
    "max.com": ("videos", "content", "transactional"),
    "crunchyroll.com": ("videos", "content", "transactional"),
    # News
    "bbc.com": ("reading", "content", "informational"),
    "bbc.co.uk": ("reading", "content", "informational"),
    "cnn.com": ("reading", "content", "informational"),
    "nytimes.com": ("reading", "content", "informational"),
    "theguardian.com": ("reading", "content", "informational"),
    "reuters.com": ("reading", "content", "informational"),
    "apnews.com": ("reading", "content", "informational"),
    "bloomberg.com": ("reading", "content", "informational"),
    "wsj.com": ("reading", "content", "informational"),
    "economist.com": ("reading", "content", "informational"),
    "ft.com": ("reading", "content", "informational"),
    "washingtonpost.com": ("reading", "content", "informational"),
    "theverge.com": ("reading", "content", "informational"),
    "arstechnica.com": ("reading", "content", "informational"),
    "wired.com": ("reading", "content", "informational"),
    "techcrunch.com": ("reading", "content", "informational"),
    "npr.org": ("reading", "content", "informational"),
    "spiegel.de": ("reading", "content", "informational"),
    "zeit.de": ("reading", "content", "informational"),
    "heise.de": ("reading", "content", "informational"),
    # Entertainment / culture
    "imdb.com": ("sorties", "content", "informational"),
    "rottentomatoes.com": ("sorties", "content", "informational"),
    "letterboxd.com": ("sorties", "content", "informational"),
    "goodreads.com": ("sorties", "content", "informational"),
    "spotify.com": ("sorties", "content", "navigational"),
    "open.spotify.com": ("sorties", "content", "navigational"),
    "soundcloud.com": ("sorties", "content", "informational"),
    "bandcamp.com": ("sorties", "content", "transactional"),
    "deezer.com": ("sorties", "content", "navigational"),
    "music.apple.com": ("sorties", "content", "navigational"),
    "steampowered.com": ("sorties", "content", "transactional"),
    "store.steampowered.com": ("sorties", "content", "transactional"),
    # Wikipedia / education
    "wikipedia.org": ("reading", "content", "informational"),
    "wikimedia.org": ("reading", "content", "informational"),
    "wikidata.org": ("reading", "content", "informational"),
    "wiktionary.org": ("reading", "content", "informational"),
    "britannica.com": ("reading", "content", "informational"),
    "coursera.org": ("reading", "content", "transactional"),
    "udemy.com": ("reading", "content", "transactional"),
    "edx.org": ("reading", "content", "transactional"),
    "khanacademy.org": ("reading", "content", "informational"),
    "duolingo.com": ("reading", "content", "navigational"),
    "scholar.google.com": ("reading", "search", "informational"),
    "researchgate.net": ("reading", "content", "informational"),
    # Cloud / productivity
    "drive.google.com": ("work", "content", "navigational"),
    "docs.google.com": ("work", "content", "navigational"),
    "sheets.google.com": ("work", "content", "navigational"),
    "calendar.google.com": ("work", "content", "navigational"),
    "dropbox.com": ("work", "content", "navigational"),
    "onedrive.live.com": ("work", "content", "navigational"),
    "notion.so": ("work", "content", "navigational"),
    "trello.com": ("work", "content", "navigational"),
    "asana.com": ("work", "content", "navigational"),
    "atlassian.net": ("work", "content", "navigational"),
    "atlassian.com": ("work", "content", "navigational"),
    "figma.com": ("work", "content", "navigational"),
    "miro.com": ("work", "content", "navigational"),
    "airtable.com": ("work", "content", "navigational"),
    "monday.com": ("work", "content", "navigational"),
    "linear.app": ("work", "content", "navigational"),
    "chatgpt.com": ("work", "communication", "informational"),
    "claude.ai": ("work", "communication", "informational"),
    # Finance
    "paypal.com": ("shopping", "content", "transactional"),
    "stripe.com": ("work", "content", "transactional"),
    "coinbase.com": ("shopping", "content", "transactional"),
    "binance.com": ("shopping", "content", "transactional"),
    "revolut.com": ("shopping", "content", "transactional"),
    "wise.com": ("shopping", "content", "transactional"),
    "chase.com": ("shopping", "content", "transactional"),
    "bankofamerica.com": ("shopping", "content", "transactional"),
    # Travel & maps
    "booking.com": ("sorties", "content", "transactional"),
    "airbnb.com": ("sorties", "content", "transactional"),
    "tripadvisor.com": ("sorties", "content", "informational"),
    "expedia.com": ("sorties", "content", "transactional"),
    "skyscanner.net": ("sorties", "search", "transactional"),
    "kayak.com": ("sorties", "search", "transactional"),
    "maps.google.com": ("sorties", "search", "navigational"),
    "openstreetmap.org": ("sorties", "content", "navigational"),
    "uber.com": ("sorties", "content", "transactional"),
    "sncf-connect.com": ("sorties", "content", "transactional"),
    "bahn.de": ("sorties", "content", "transactional"),
    # French sites
    "lemonde.fr": ("reading", "content", "informational"),
    "lefigaro.fr": ("reading", "content", "informational"),
    "liberation.fr": ("reading", "content", "informational"),
    "ouest-france.fr": ("reading", "content", "informational"),
    "francetvinfo.fr": ("reading", "content", "informational"),
    "leboncoin.fr": ("shopping", "content", "transactional"),
    "allocine.fr": ("sorties", "content", "informational"),
    "marmiton.org": ("reading", "content", "informational"),
}

# Fallback hints for domains missing from KNOWN_DOMAINS
COMMUNICATION_DOMAINS: tuple[str, ...] = (
    "gmail.com",
    "mail.google.com",
    "outlook.com",
    "mail.yahoo.com",
    "slack.com",
    "discord.com",
    "teams.microsoft.com",
    "telegram.org",
    "whatsapp.com",
    "messenger.com",
)

SEARCH_DOMAINS: tuple[str, ...] = (
    "google.com",
    "bing.com",
    "duckduckgo.com",
    "yahoo.com",
    "baidu.com",
    "yandex.com",
    "search.brave.com",
)
