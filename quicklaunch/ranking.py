from .models import Result

MAX_RESULTS = 10


def score_application(app, query):
    """Score against the first keyword containing the (lower-cased) query.

    Later keywords are never looked at, even if they would score higher.
    Returns None when nothing matches.
    """
    for i, keyword in enumerate(app.keywords):
        pos = keyword.word.find(query)
        if pos != -1:
            return (100 - i) * keyword.weight * (10000 if pos == 0 else 100) + app.launch_count
    return None


def search(query, catalog, limit=MAX_RESULTS):
    query = query.lower()
    if not query:
        return []

    results = []
    for app in catalog:
        score = score_application(app, query)
        if score is not None:
            results.append(Result(app.id, score))

    # sorted() is stable, so equal scores keep catalog order
    results = sorted(results, key=lambda r: r.score, reverse=True)
    return results[:limit]


def match_span(text, query):
    if not query:
        return None
    start = text.lower().find(query.lower())
    if start == -1:
        return None
    return start, start + len(query)
