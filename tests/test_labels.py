from gauge_metrics.metrics.labels import INDEX_WIDTH_BITS, LabelIndex, format_labels


def test_empty_labels_resolve_to_zero():
    index = LabelIndex()
    assert index.resolve({}) == 0
    assert index.resolve(None) == 0
    assert len(index) == 0


def test_weights_are_assigned_in_discovery_order():
    index = LabelIndex()
    assert index.resolve({"dir": "in"}) == 1
    assert index.resolve({"dir": "out"}) == 2
    assert index.resolve({"dir": "in", "peer": "relay"}) == 1 + 4
    assert index.resolve({"dir": "in"}) == 1


def test_index_ignores_label_order():
    index = LabelIndex()
    first = index.resolve({"a": "1", "b": "2", "c": "3"})
    second = index.resolve({"c": "3", "a": "1", "b": "2"})
    assert first == second


def test_distinct_label_sets_get_distinct_indices():
    index = LabelIndex()
    label_sets = [
        {},
        {"a": "1"},
        {"a": "2"},
        {"b": "1"},
        {"a": "1", "b": "1"},
        {"a": "2", "b": "1"},
    ]
    resolved = [index.resolve(labels) for labels in label_sets]
    assert len(set(resolved)) == len(label_sets)


def test_colons_in_keys_and_values_do_not_alias():
    index = LabelIndex()
    assert index.resolve({"a:b": "c"}) != index.resolve({"a": "b:c"})


def test_indices_stay_unique_past_index_width():
    index = LabelIndex()
    count = INDEX_WIDTH_BITS * 2 + 5
    resolved = [index.resolve({"peer": str(i)}) for i in range(count)]
    assert resolved == [1 << i for i in range(count)]
    combined = index.resolve({"peer": str(count - 1), "extra": "x"})
    assert combined == (1 << (count - 1)) + (1 << count)


def test_format_labels_keeps_insertion_order_and_escapes():
    assert format_labels({}) == ""
    assert format_labels({"dir": "in", "peer": "relay"}) == 'dir="in",peer="relay"'
    assert format_labels({"path": 'C:\\tmp "x"\n'}) == 'path="C:\\\\tmp \\"x\\"\\n"'
