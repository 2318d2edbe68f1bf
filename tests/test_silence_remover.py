import pytest

from chromakit.consumers import AudioCollector
from chromakit.silence_remover import SilenceRemover


def test_leading_silence_is_dropped():
    collector = AudioCollector()
    remover = SilenceRemover(collector)
    remover.consume([0, 0, 0, 5, 6])
    assert collector.samples == [5, 6]


def test_after_start_everything_passes():
    collector = AudioCollector()
    remover = SilenceRemover(collector)
    remover.consume([0, 0, 7])
    remover.consume([0, 0, 0])
    assert collector.samples == [7, 0, 0, 0]


def test_quiet_audio_below_threshold_is_dropped():
    collector = AudioCollector()
    remover = SilenceRemover(collector, threshold=1000)
    remover.consume([10, -10, 20, -20] * 50)
    assert collector.samples == []


def test_threshold_can_be_changed():
    collector = AudioCollector()
    remover = SilenceRemover(collector, threshold=1000)
    remover.consume([10] * 10)
    remover.threshold = 5
    remover.consume([10, 11, 12])
    assert collector.samples == [10, 11, 12]


def test_negative_samples_count_by_magnitude():
    collector = AudioCollector()
    remover = SilenceRemover(collector)
    remover.consume([0, -3, 4])
    assert collector.samples == [-3, 4]


def test_reset_rejects_multichannel():
    remover = SilenceRemover(AudioCollector())
    with pytest.raises(ValueError):
        remover.reset(11025, 2)


def test_flush_emits_nothing():
    collector = AudioCollector()
    remover = SilenceRemover(collector, threshold=1000)
    remover.consume([1, 2, 3])
    remover.flush()
    assert collector.samples == []