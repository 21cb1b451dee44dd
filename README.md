# wavkit

A small library for reading and writing WAV (RIFF/WAVE) audio files.
It has no dependencies outside the standard library.

It reads the `fmt ` and `data` chunks of a WAV file and decodes samples in
these encodings:

- integer PCM at 8, 16, 24 or 32 bits per sample (8-bit values are returned
  as unsigned numbers, the others as signed ones)
- 32-bit IEEE float (scaled to integers by 2**31)
- G.711 A-law
- G.711 mu-law

It writes integer PCM files.

## Installation

```
pip install wavkit
```

To run the test suite, install the `test` extra and run `pytest`:

```
pip install "wavkit[test]"
pytest
```

## Reading a file

```python
from wavkit.reader import Reader

with open("speech.wav", "rb") as stream:
    reader = Reader(stream)

    fmt = reader.format()
    print(fmt.num_channels, fmt.sample_rate, fmt.bits_per_sample)
    print(reader.duration())          # length in seconds, as a float

    samples = reader.read_samples(1024)
    first = samples[0]
    print(reader.int_value(first, 0))    # integer value of channel 0
    print(reader.float_value(first, 0))  # that value divided by 2 ** (bits - 1)

    rest = reader.read(4096)          # raw bytes of the data chunk
    print(reader.position())          # bytes consumed from the data chunk
```

The stream is parsed lazily: the RIFF chunks are read the first time
`format()`, `duration()`, `read()` or `read_samples()` is called.
`position()` raises `RuntimeError` if the data chunk has not been loaded yet.

`read_samples(count=2048)` returns up to `count` frames as `Sample` objects.
Each sample holds one value per channel, padded with zeros to at least two
values for mono files. A partial frame at the end of the data is dropped.
It raises `EOFError` once no complete frame is left, so a whole file can be
read with a loop:

```python
while True:
    try:
        block = reader.read_samples(2048)
    except EOFError:
        break
    ...
```

A stream that is not RIFF, or lacks a `fmt ` or `data` chunk, raises
`wavkit.riff.RiffError` (a subclass of `ValueError`). A format chunk with
0 bits per sample raises `ValueError`.

## Writing a file

The total number of samples is given up front, because the RIFF and `data`
chunk sizes are written into the header as soon as the `Writer` is created.

```python
from wavkit.format import Sample
from wavkit.writer import Writer

samples = [Sample([32767, -32768]), Sample([123, -123])]

with open("out.wav", "wb") as stream:
    writer = Writer(stream, num_samples=2, num_channels=2,
                    sample_rate=44100, bits_per_sample=16)
    writer.write_samples(samples)
```

`write_samples` encodes each channel as little-endian PCM of the writer's
bit depth; a sample with fewer values than channels raises `ValueError`.
The format written is available as `writer.format`.

## What it does not do

- It writes integer PCM only; there is no encoder for IEEE float, A-law or
  mu-law output.
- The writer does not check that the number of samples written matches the
  count given in the header.
- There is no command-line tool and no audio playback.

## Modules

- `wavkit.format`: `AudioFormat`, `WavFormat`, `WavData`, `Sample`
- `wavkit.riff`: low-level RIFF chunk reading and writing (`read_riff`,
  `find_chunk`, `write_riff_header`, `write_chunk_header`, `Chunk`, `RiffError`)
- `wavkit.g711`: `decode_alaw` and `decode_ulaw`
- `wavkit.reader`: `Reader` and `to_int`
- `wavkit.writer`: `Writer` and `to_uint`