from __future__ import annotations

from pathlib import Path

import pytest

from instances.datasets import (
    InstanceSet,
    ProblemInstance,
    generate_instance_set,
    generate_uniform_instance,
    generate_weibull_instance,
    instance_summary,
    load_items_file,
    load_orlib_dataset,
    parse_orlib_file,
    save_items_file,
)

ORLIB_SAMPLE = """ 2
 u_test_00
 10 4 2
 6
 4
 5
 5
 u_test_01
 20 3 2
 12 9
 8
"""


class TestProblemInstance:
    def test_derived_properties(self) -> None:
        inst = ProblemInstance(name="demo", capacity=5, items=[4, 3, 2, 2])

        assert inst.num_items == 4
        assert inst.total_size == 11
        assert inst.min_size == 2
        assert inst.lower_bound == 3
        assert inst.best_known is None

    def test_to_config(self) -> None:
        config = ProblemInstance(name="demo", capacity=5, items=[4, 3, 2, 2]).to_config()

        assert config.capacity == 5
        assert config.num_items == 4
        assert config.min_size == 2


class TestGenerators:
    def test_uniform_is_deterministic(self) -> None:
        a = generate_uniform_instance(num_items=50, capacity=100, seed=9)
        b = generate_uniform_instance(num_items=50, capacity=100, seed=9)
        assert a.items == b.items

    def test_uniform_respects_range(self) -> None:
        inst = generate_uniform_instance(num_items=500, capacity=100, min_size=20, max_size=40, seed=1)
        assert all(20 <= s <= 40 for s in inst.items)

    def test_uniform_rejects_bad_range(self) -> None:
        with pytest.raises(ValueError):
            generate_uniform_instance(num_items=5, capacity=10, min_size=5, max_size=11)

    def test_weibull_sizes_within_capacity(self) -> None:
        inst = generate_weibull_instance(num_items=500, capacity=50, scale=40.0, seed=3)
        assert all(1 <= s <= 50 for s in inst.items)
        assert inst.num_items == 500

    def test_instance_set_uses_consecutive_seeds(self) -> None:
        instances = generate_instance_set("uniform", num_instances=3, num_items=10, capacity=20, base_seed=7)

        assert len(instances) == 3
        assert instances[1].items == generate_uniform_instance(10, 20, seed=8).items
        assert instances.name == "uniform"

    def test_instance_set_unknown_kind(self) -> None:
        with pytest.raises(ValueError):
            generate_instance_set("gaussian", num_instances=1, num_items=1)

    def test_filter_by_size(self) -> None:
        instances = InstanceSet(
            name="mixed",
            instances=[
                ProblemInstance(name="a", capacity=10, items=[1] * 5),
                ProblemInstance(name="b", capacity=10, items=[1] * 50),
            ],
        )

        assert [i.name for i in instances.filter_by_size(max_items=10)] == ["a"]
        assert [i.name for i in instances.filter_by_size(min_items=10)] == ["b"]


class TestOrlib:
    def test_parse_orlib_file(self, tmp_path: Path) -> None:
        path = tmp_path / "sample.txt"
        path.write_text(ORLIB_SAMPLE)

        instances = parse_orlib_file(path)

        assert [i.name for i in instances] == ["u_test_00", "u_test_01"]
        assert instances[0].items == [6, 4, 5, 5]
        assert instances[0].best_known == 2
        assert instances[1].capacity == 20
        assert instances[1].items == [12, 9, 8]

    def test_load_uses_cached_file(self, tmp_path: Path) -> None:
        (tmp_path / "binpack1.txt").write_text(ORLIB_SAMPLE)

        dataset = load_orlib_dataset(["binpack1.txt"], cache_dir=tmp_path)

        assert len(dataset) == 2
        assert dataset.name == "orlib"

    def test_load_unknown_file(self, tmp_path: Path) -> None:
        with pytest.raises(ValueError):
            load_orlib_dataset(["binpack99.txt"], cache_dir=tmp_path)


class TestItemFiles:
    def test_roundtrip(self, tmp_path: Path) -> None:
        path = tmp_path / "items" / "demo.txt"
        save_items_file(path, [4, 3, 2, 2])

        assert load_items_file(path) == [4, 3, 2, 2]

    def test_comments_and_whitespace(self, tmp_path: Path) -> None:
        path = tmp_path / "items.txt"
        path.write_text("# sizes\n4 3\n\n2   2  # tail\n")

        assert load_items_file(path) == [4, 3, 2, 2]

    def test_rejects_non_integer(self, tmp_path: Path) -> None:
        path = tmp_path / "items.txt"
        path.write_text("4\nfour\n")

        with pytest.raises(ValueError, match=":2:"):
            load_items_file(path)

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_items_file(tmp_path / "nope.txt")


def test_instance_summary() -> None:
    instances = generate_instance_set("weibull", num_instances=2, num_items=30)
    summary = instance_summary(instances)

    assert "Instances: 2" in summary
    assert "Capacities: [100]" in summary
    assert "empty" in instance_summary(InstanceSet(name="none", instances=[]))
