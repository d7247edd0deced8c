from rhymecraft.core import RhymeIndex


def test_near_buckets_keep_dictionary_order(sample_loader):
    index = RhymeIndex.build(sample_loader)

    assert index.near_bucket("AY") == ("night", "light", "sight", "bright", "kite", "bite")
    assert index.near_bucket("AE")[:3] == ("cat", "hat", "at")


def test_best_pronunciation_decides_bucket(sample_loader):
    index = RhymeIndex.build(sample_loader)

    assert "acrobat" in index.near_bucket("AE")
    assert "matter" in index.near_bucket("ER")
    assert "cinema" in index.near_bucket("AH")
    assert "cinema" in index.perfect_bucket("IH-N-AH-M-AH")
    assert "read" in index.perfect_bucket("EH-D")
    assert "read" not in index.perfect_bucket("IY-D")


def test_words_appear_once_per_bucket(sample_loader):
    index = RhymeIndex.build(sample_loader)

    for bucket in list(index.near.values()) + list(index.perfect.values()):
        assert len(bucket) == len(set(bucket))
    assert index.near_bucket("AH").count("the") == 1


def test_words_without_vowels_are_skipped(sample_loader):
    index = RhymeIndex.build(sample_loader)

    every_word = {word for bucket in index.near.values() for word in bucket}
    every_word |= {word for bucket in index.perfect.values() for word in bucket}
    assert "hmm" not in every_word


def test_unknown_keys_give_empty_buckets(sample_loader):
    index = RhymeIndex.build(sample_loader)

    assert index.near_bucket("ZZ") == ()
    assert index.perfect_bucket("ZZ") == ()
