"""Unit tests for lineage_bench.workload.naming."""

from __future__ import annotations

from lineage_bench.config import BenchSettings
from lineage_bench.models.metadata import NodeFamily
from lineage_bench.workload.naming import NameGenerator


class TestNameFormat:
    def test_type_names(self):
        names = NameGenerator(run_id="r1").type_names(NodeFamily.ARTIFACT, 2)
        assert names == [
            "pre_insert_artifact_type-r1-0-0",
            "pre_insert_artifact_type-r1-0-1",
        ]

    def test_node_names(self):
        names = NameGenerator(run_id="r1").node_names(NodeFamily.CONTEXT, 1)
        assert names == ["pre_insert_context-r1-0-0"]

    def test_custom_prefix(self):
        names = NameGenerator(run_id="r1", prefix="bench").node_names(NodeFamily.EXECUTION, 1)
        assert names == ["bench_execution-r1-0-0"]

    def test_zero_count_yields_no_names(self):
        assert NameGenerator(run_id="r1").type_names(NodeFamily.CONTEXT, 0) == []


class TestUniqueness:
    def test_names_within_batch_are_distinct(self):
        names = NameGenerator(run_id="r1").node_names(NodeFamily.ARTIFACT, 500)
        assert len(set(names)) == 500

    def test_successive_batches_do_not_collide(self):
        generator = NameGenerator(run_id="r1")
        first = generator.type_names(NodeFamily.ARTIFACT, 10)
        second = generator.type_names(NodeFamily.ARTIFACT, 10)
        assert not set(first) & set(second)

    def test_different_run_ids_do_not_collide(self):
        first = NameGenerator(run_id="a").type_names(NodeFamily.ARTIFACT, 10)
        second = NameGenerator(run_id="b").type_names(NodeFamily.ARTIFACT, 10)
        assert not set(first) & set(second)

    def test_default_run_ids_differ_between_generators(self):
        assert NameGenerator().run_id != NameGenerator().run_id

    def test_type_and_node_names_never_overlap(self):
        generator = NameGenerator(run_id="r1")
        types = generator.type_names(NodeFamily.ARTIFACT, 5)
        nodes = generator.node_names(NodeFamily.ARTIFACT, 5)
        assert not set(types) & set(nodes)


class TestReproducibility:
    def test_same_run_id_reproduces_names(self):
        first = NameGenerator(run_id="fixed")
        second = NameGenerator(run_id="fixed")
        for family in NodeFamily:
            assert first.type_names(family, 3) == second.type_names(family, 3)
            assert first.node_names(family, 3) == second.node_names(family, 3)

    def test_from_settings(self):
        settings = BenchSettings(run_id="nightly", name_prefix="seed")
        generator = NameGenerator.from_settings(settings)
        assert generator.run_id == "nightly"
        assert generator.node_names(NodeFamily.CONTEXT, 1) == ["seed_context-nightly-0-0"]

    def test_from_settings_without_run_id_uses_clock(self):
        generator = NameGenerator.from_settings(BenchSettings())
        assert generator.run_id.split(".")[0].isdigit()
