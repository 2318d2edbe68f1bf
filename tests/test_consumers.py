import pytest

from chromakit.consumers import AudioCollector, AudioConsumer, FeatureVectorConsumer


def test_audio_consumer_is_abstract():
    with pytest.raises(TypeError):
        AudioConsumer()


def test_feature_vector_consumer_is_abstract():
    with pytest.raises(TypeError):
        FeatureVectorConsumer()


def test_audio_collector_keeps_samples_in_order():
    collector = AudioCollector()
    collector.consume([1, -2, 3])
    collector.consume([])
    collector.consume([4])
    assert collector.samples == [1, -2, 3, 4]


def test_audio_collector_is_audio_consumer():
    collector = AudioCollector()
    assert isinstance(collector, AudioConsumer)
    assert collector.samples == []


def test_audio_collector_accepts_tuples():
    collector = AudioCollector()
    collector.consume((5, 6))
    collector.consume((-7,))
    assert collector.samples == [5, 6, -7]