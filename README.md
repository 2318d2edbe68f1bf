# chromakit

Pure-Python building blocks for chroma-based audio fingerprinting. The
package has no dependencies beyond the standard library.

## Installation

```
pip install chromakit
```

To run the test suite:

```
pip install "chromakit[test]"
pytest
```

## Modules

- `chromakit.utils`: `prepare_hamming_window`, `apply_window`,
  `euclidean_norm`, `normalize_vector`, `gray_code`, `index_to_freq`,
  `freq_to_index`, `freq_to_bark`, `count_set_bits` and `hamming_distance`
  (the last two work on unsigned integers of a given bit width, 32 by default).
- `chromakit.simhash`: `simhash(data)` folds 32-bit values into one 32-bit
  hash whose bits are set where more than half of the inputs have them set.
  An empty input gives 0.
- `chromakit.audio_slicer`: `AudioSlicer(size, increment)` cuts a stream of
  samples into frames of `size` samples, each starting `increment` samples
  after the previous one, whatever the block sizes fed to `process`. The
  consumer is called with two sequences, samples held over from earlier
  blocks and new samples; together they form one frame. `reset()` drops
  buffered samples.
- `chromakit.filter_utils`: the comparators `subtract` and `subtract_log`
  and the six rectangle filters `filter0` … `filter5`, evaluated over any
  object with an `area(r1, c1, r2, c2)` method returning a rectangle sum.
- `chromakit.consumers`: the abstract `AudioConsumer` and
  `FeatureVectorConsumer` interfaces, and `AudioCollector`, which keeps every
  sample it receives in its `samples` list.
- `chromakit.spectrum`: `Spectrum` divides FFT bins into Bark-spaced bands
  and passes the average of each band on to a `FeatureVectorConsumer`.
- `chromakit.image_builder`: `ImageBuilder` appends each feature vector as a
  row of an image object that has `num_columns` and `add_row(row)`; a vector
  of the wrong length raises `ValueError`.
- `chromakit.silence_remover`: `SilenceRemover` holds back audio until the
  mean absolute value of the last 55 samples first exceeds its `threshold`,
  then passes everything on. `reset` accepts mono audio only and raises
  `ValueError` otherwise.
- `chromakit.configuration`: `FilterSpec`, `QuantizerSpec`, `Classifier`,
  the trained classifier tables, the `Algorithm` enum (`TEST1` to `TEST5`),
  `FingerprinterConfiguration` and `create_fingerprinter_configuration`.

## Examples

```python
from chromakit.audio_slicer import AudioSlicer
from chromakit.simhash import simhash

frames = []
slicer = AudioSlicer(4, 2)
collect = lambda held, new: frames.append(list(held) + list(new))
slicer.process([0, 1, 2], collect)
slicer.process([3, 4, 5], collect)
# frames == [[0, 1, 2, 3], [2, 3, 4, 5]]

print(simhash([0b1011, 0b0011, 0b0001]))  # 3
```

```python
from chromakit.configuration import Algorithm, create_fingerprinter_configuration

config = create_fingerprinter_configuration(Algorithm.TEST2)
print(config.item_duration())  # 1365 samples
print(config.delay())          # 28666 samples
print(config.delay_in_seconds())
```

An unknown algorithm number raises `ValueError`.

## What the package does not do

chromakit provides the individual stages only. It does not decode or
resample audio files, compute FFTs or chroma features, provide an image or
integral-image class, calculate or compress complete fingerprints, or
compare fingerprints, and it has no command-line tool. To run a full
pipeline you supply those parts yourself and connect them through the
consumer interfaces.