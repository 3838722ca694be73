"""Tests for ranking and diverse selection."""

from dailyreads.ranking.selector import rank_articles, select_articles

A = "https://feed-a.example/rss"
B = "https://feed-b.example/rss"


def _urls(selected):
    return [s.url for s in selected]


class TestSelectArticles:
    def test_non_positive_scores_select_nothing(self, make_scored):
        scored = [make_scored(0, "https://x/1"), make_scored(-30, "https://x/2"), make_scored(-1000, "https://x/3")]

        assert select_articles(scored) == []

    def test_empty_input(self):
        assert select_articles([]) == []

    def test_at_most_nine_unique_urls(self, make_scored):
        scored = [make_scored(100 - i, f"https://x/{i % 12}", source=f"https://feed-{i % 3}.example") for i in range(30)]

        selected = select_articles(scored)

        assert len(selected) == 9
        assert len(set(_urls(selected))) == 9

    def test_duplicate_url_across_feeds_selected_once(self, make_scored):
        scored = [
            make_scored(90, "https://x/shared", source=A),
            make_scored(80, "https://x/shared", source=B),
            make_scored(70, "https://x/other", source=B),
        ]

        assert _urls(select_articles(scored)) == ["https://x/shared", "https://x/other"]

    def test_first_five_picks_use_distinct_sources(self, make_scored):
        scored = []
        for rank, source_id in enumerate("aaabbbcccdddeeefff"):
            scored.append(make_scored(100 - rank, f"https://x/{rank}", source=f"https://{source_id}.example"))
        scored.sort(key=lambda a: a.score, reverse=True)

        selected = select_articles(scored)
        by_url = {a.url: a for a in scored}
        first_sources = [by_url[s.url].source for s in selected[:5]]

        assert len(set(first_sources)) == 5
        assert len(selected) == 9

    def test_cap_relaxes_after_five_picks(self, make_scored):
        sources = [f"https://s{i}.example" for i in range(5)]
        scored = [make_scored(100 - i, f"https://x/{i}", source=sources[i]) for i in range(5)]
        scored += [make_scored(50 - i, f"https://x/extra{i}", source=sources[0]) for i in range(4)]

        selected = select_articles(scored)

        assert _urls(selected) == [f"https://x/{i}" for i in range(5)] + [f"https://x/extra{i}" for i in range(4)]

    def test_backfill_when_few_sources(self, make_scored):
        scored = [
            make_scored(100, "https://x/a1", source=A),
            make_scored(90, "https://x/a2", source=A),
            make_scored(80, "https://x/b1", source=B),
            make_scored(70, "https://x/a3", source=A),
            make_scored(60, "https://x/b2", source=B),
        ]

        selected = select_articles(scored)

        assert _urls(selected) == [
            "https://x/a1",
            "https://x/b1",
            "https://x/a2",
            "https://x/a3",
            "https://x/b2",
        ]

    def test_output_contains_only_title_and_url(self, make_scored):
        selected = select_articles([make_scored(10, "https://x/1", title="Some long enough title here")])

        assert selected[0].model_dump() == {"title": "Some long enough title here", "url": "https://x/1"}

    def test_custom_limits(self, make_scored):
        scored = [make_scored(100 - i, f"https://x/{i}", source=A) for i in range(5)]

        selected = select_articles(scored, max_articles=3, diversity_threshold=0)

        assert _urls(selected) == ["https://x/0", "https://x/1", "https://x/2"]


class TestRankArticles:
    def test_drops_non_positive_and_sorts(self, make_raw, now):
        articles = [
            make_raw(title="A quiet note on gardens in spring", url="https://x/plain", hours_old=500),
            make_raw(title="Short", url="https://x/short"),
            make_raw(title="A quiet note on gardens in spring", url="https://x/fresh", hours_old=1),
        ]

        ranked = rank_articles(articles, now=now)

        assert [a.url for a in ranked] == ["https://x/fresh", "https://x/plain"]
        assert [a.score for a in ranked] == [30, 10]

    def test_ties_keep_input_order(self, make_raw, now):
        articles = [
            make_raw(title="A quiet note on gardens in spring", url=f"https://x/{i}", hours_old=2)
            for i in range(4)
        ]

        ranked = rank_articles(articles, now=now)

        assert [a.url for a in ranked] == [f"https://x/{i}" for i in range(4)]
