import pytest

from chromakit.consumers import FeatureVectorConsumer
from chromakit.spectrum import Spectrum
from chromakit.utils import freq_to_index

FRAME_SIZE = 4096
SAMPLE_RATE = 11025


class _Collector(FeatureVectorConsumer):
    def __init__(self):
        self.vectors = []

    def consume(self, features):
        self.vectors.append(list(features))


def _make(num_bands=12):
    collector = _Collector()
    spectrum = Spectrum(num_bands, 28, 3520, FRAME_SIZE, SAMPLE_RATE, collector)
    return spectrum, collector


def test_num_bands_matches_request():
    spectrum, _ = _make(12)
    assert spectrum.num_bands() == 12


def test_first_band_starts_at_min_frequency_bin():
    spectrum, _ = _make()
    assert spectrum.first_index(0) == freq_to_index(28, FRAME_SIZE, SAMPLE_RATE)


def test_bands_are_contiguous_and_increasing():
    spectrum, _ = _make()
    for band in range(spectrum.num_bands()):
        assert spectrum.last_index(band) > spectrum.first_index(band)
        if band + 1 < spectrum.num_bands():
            assert spectrum.first_index(band + 1) == spectrum.last_index(band)
    assert spectrum.last_index(spectrum.num_bands() - 1) < FRAME_SIZE // 2


def test_constant_frame_gives_constant_features():
    spectrum, collector = _make()
    spectrum.consume([2.0] * (FRAME_SIZE // 2 + 1))
    assert len(collector.vectors) == 1
    assert collector.vectors[0] == pytest.approx([2.0] * 12)


def test_each_frame_produces_one_vector():
    spectrum, collector = _make(6)
    spectrum.consume([1.0] * (FRAME_SIZE // 2 + 1))
    spectrum.reset()
    spectrum.consume([0.0] * (FRAME_SIZE // 2 + 1))
    assert len(collector.vectors) == 2
    assert all(len(vector) == 6 for vector in collector.vectors)
    assert collector.vectors[1] == [0.0] * 6


def test_energy_in_one_band_only():
    spectrum, collector = _make()
    frame = [0.0] * (FRAME_SIZE // 2 + 1)
    first, last = spectrum.first_index(3), spectrum.last_index(3)
    for j in range(first, last):
        frame[j] = 1.0
    spectrum.consume(frame)
    features = collector.vectors[0]
    assert features[3] == pytest.approx(1.0)
    assert sum(features) == pytest.approx(1.0)


def test_zero_bands_rejected():
    with pytest.raises(ValueError):
        Spectrum(0, 28, 3520, FRAME_SIZE, SAMPLE_RATE, _Collector())