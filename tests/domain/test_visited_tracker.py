import threading

from wordcrawl.domain.visited_tracker import VisitedTracker


def test_url_not_visited_initially():
    tracker = VisitedTracker()
    assert not tracker.is_visited("https://example.com")


def test_marking_url_makes_it_visited():
    tracker = VisitedTracker()
    assert tracker.mark_if_absent("https://example.com")
    assert tracker.is_visited("https://example.com")


def test_different_urls_tracked_independently():
    tracker = VisitedTracker()
    tracker.mark_if_absent("https://example.com")
    assert tracker.is_visited("https://example.com")
    assert not tracker.is_visited("https://other.com")


def test_marking_same_url_twice_only_claims_once():
    tracker = VisitedTracker()
    assert tracker.mark_if_absent("https://example.com")
    assert not tracker.mark_if_absent("https://example.com")
    assert len(tracker) == 1


def test_single_stripe_still_works():
    tracker = VisitedTracker(stripes=0)
    assert tracker.mark_if_absent("a")
    assert tracker.mark_if_absent("b")
    assert len(tracker) == 2


def test_concurrent_claims_have_exactly_one_winner():
    tracker = VisitedTracker(stripes=4)
    urls = [f"https://example.com/{i}" for i in range(50)]
    wins = []
    wins_lock = threading.Lock()
    barrier = threading.Barrier(8)

    def claim_all():
        barrier.wait()
        mine = [url for url in urls if tracker.mark_if_absent(url)]
        with wins_lock:
            wins.extend(mine)

    threads = [threading.Thread(target=claim_all) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert sorted(wins) == sorted(urls)
    assert len(tracker) == len(urls)
