import json

from tictactoe.storage import JsonScoreStore, MemoryScoreStore, clean_scores


def test_missing_file_gives_zeros(tmp_path):
    store = JsonScoreStore(tmp_path / "nope.json")
    assert store.load_scores() == {'X': 0, 'O': 0, 'draw': 0}


def test_save_then_load(tmp_path):
    path = tmp_path / "sub" / "scores.json"
    store = JsonScoreStore(path)
    assert store.save_scores({'X': 3, 'O': 1, 'draw': 2})
    assert json.loads(path.read_text(encoding='utf-8')) == {'X': 3, 'O': 1, 'draw': 2}
    assert JsonScoreStore(path).load_scores() == {'X': 3, 'O': 1, 'draw': 2}


def test_corrupt_file_gives_zeros(tmp_path):
    path = tmp_path / "scores.json"
    path.write_text("{not json", encoding='utf-8')
    assert JsonScoreStore(path).load_scores() == {'X': 0, 'O': 0, 'draw': 0}


def test_bad_values_are_dropped(tmp_path):
    path = tmp_path / "scores.json"
    path.write_text(json.dumps({'X': 5, 'O': -2, 'draw': "7", 'extra': 9}), encoding='utf-8')
    assert JsonScoreStore(path).load_scores() == {'X': 5, 'O': 0, 'draw': 0}


def test_non_object_json_gives_zeros(tmp_path):
    path = tmp_path / "scores.json"
    path.write_text("[1, 2, 3]", encoding='utf-8')
    assert JsonScoreStore(path).load_scores() == {'X': 0, 'O': 0, 'draw': 0}


def test_unwritable_location_does_not_raise(tmp_path):
    blocker = tmp_path / "file"
    blocker.write_text("", encoding='utf-8')
    # parent "directory" is a regular file
    store = JsonScoreStore(blocker / "scores.json")
    assert store.save_scores({'X': 1, 'O': 0, 'draw': 0}) is False


def test_clean_scores():
    assert clean_scores(None) == {'X': 0, 'O': 0, 'draw': 0}
    assert clean_scores({'X': True, 'O': 2}) == {'X': 0, 'O': 2, 'draw': 0}


def test_memory_store_counts_saves():
    store = MemoryScoreStore({'X': 1})
    assert store.load_scores() == {'X': 1, 'O': 0, 'draw': 0}
    store.save_scores({'X': 2, 'O': 0, 'draw': 1})
    assert store.saves == 1
    loaded = store.load_scores()
    loaded['X'] = 50
    assert store.load_scores()['X'] == 2
