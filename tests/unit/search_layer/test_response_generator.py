"""
Unit Tests for SimulatedResponseGenerator

Tests chunk content and ordering, delay ranges and cancellation.
"""

import asyncio
from unittest.mock import MagicMock

import pytest

from ai_search.core.config.settings import GeneratorSettings
from ai_search.core.exceptions import ConfigurationError
from ai_search.search.response_generator import (
    SimulatedResponseGenerator,
    summary_chunk,
    word_chunk,
)


async def collect(generator, query, cancel_event=None):
    return [chunk async for chunk in generator.generate(query, cancel_event)]


@pytest.mark.unit
class TestChunkTemplates:
    def test_word_chunk(self):
        assert word_chunk("hello") == "hello is an interesting term. "

    def test_summary_chunk(self):
        assert summary_chunk("hello world") == (
            "\nYour query was: 'hello world'. This is a simulated AI response."
        )


@pytest.mark.unit
@pytest.mark.asyncio
class TestGenerate:
    async def test_hello_world(self, instant_generator):
        chunks = await collect(instant_generator, "hello world")

        assert chunks == [
            "hello is an interesting term. ",
            "world is an interesting term. ",
            "\nYour query was: 'hello world'. This is a simulated AI response.",
        ]

    async def test_one_chunk_per_word_plus_summary(self, instant_generator):
        chunks = await collect(instant_generator, "a  b\tc\nd")

        assert len(chunks) == 5
        assert [c.split(" ")[0] for c in chunks[:4]] == ["a", "b", "c", "d"]

    async def test_empty_query_yields_only_summary(self, instant_generator):
        chunks = await collect(instant_generator, "")

        assert chunks == ["\nYour query was: ''. This is a simulated AI response."]

    async def test_each_call_is_a_fresh_sequence(self, instant_generator):
        first = await collect(instant_generator, "one")
        second = await collect(instant_generator, "one")

        assert first == second

    async def test_delays_drawn_from_configured_ranges(self):
        rng = MagicMock()
        rng.uniform.return_value = 0.0
        generator = SimulatedResponseGenerator(
            chunk_delay=(0.1, 0.5), summary_delay=(0.3, 0.8), rng=rng
        )

        await collect(generator, "hello world")

        assert [call.args for call in rng.uniform.call_args_list] == [
            (0.1, 0.5),
            (0.1, 0.5),
            (0.3, 0.8),
        ]


@pytest.mark.unit
@pytest.mark.asyncio
class TestCancellation:
    async def test_preset_cancel_yields_nothing(self, instant_generator):
        cancel = asyncio.Event()
        cancel.set()

        assert await collect(instant_generator, "hello world", cancel) == []

    async def test_cancel_between_chunks_stops_sequence(self, instant_generator):
        cancel = asyncio.Event()
        chunks = []

        async for chunk in instant_generator.generate("a b c d", cancel):
            chunks.append(chunk)
            cancel.set()

        assert chunks == ["a is an interesting term. "]

    async def test_cancel_during_delay_is_immediate(self):
        generator = SimulatedResponseGenerator(chunk_delay=(30.0, 30.0), summary_delay=(30.0, 30.0))
        cancel = asyncio.Event()

        task = asyncio.create_task(collect(generator, "slow query", cancel))
        await asyncio.sleep(0.01)
        cancel.set()

        chunks = await asyncio.wait_for(task, timeout=2.0)
        assert chunks == []


@pytest.mark.unit
class TestConfiguration:
    @pytest.mark.parametrize(
        "chunk_delay,summary_delay",
        [
            ((0.5, 0.1), (0.3, 0.8)),
            ((-0.1, 0.5), (0.3, 0.8)),
            ((0.1, 0.5), (0.9, 0.8)),
        ],
    )
    def test_invalid_ranges_rejected(self, chunk_delay, summary_delay):
        with pytest.raises(ConfigurationError):
            SimulatedResponseGenerator(chunk_delay=chunk_delay, summary_delay=summary_delay)

    def test_from_settings(self):
        settings = GeneratorSettings(
            GENERATOR_CHUNK_DELAY_MIN=0.0,
            GENERATOR_CHUNK_DELAY_MAX=0.0,
            GENERATOR_SUMMARY_DELAY_MIN=0.0,
            GENERATOR_SUMMARY_DELAY_MAX=0.0,
        )

        generator = SimulatedResponseGenerator.from_settings(settings)

        assert isinstance(generator, SimulatedResponseGenerator)

    def test_from_settings_rejects_inverted_range(self):
        settings = GeneratorSettings(GENERATOR_CHUNK_DELAY_MIN=1.0, GENERATOR_CHUNK_DELAY_MAX=0.5)

        with pytest.raises(ConfigurationError):
            SimulatedResponseGenerator.from_settings(settings)
