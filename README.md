# minitalk

Send a text message from one process to another using only two POSIX
signals. The client encodes each byte of the message as eight bits, most
significant bit first. A `0` bit is sent as `SIGUSR1` and a `1` bit as
`SIGUSR2`. After each bit the client waits for the server to acknowledge
it with `SIGUSR1`. A NUL byte ends the message. Once the server has the
whole message, it writes it to standard output on a line of its own.

The server decodes one message at a time. If a bit arrives from a
different process than the one that sent the previous bit, the server
drops the partial message and starts again with the new sender.

The client runs on any POSIX system. The server waits for signals with
`signal.sigwaitinfo`, which is not available on every POSIX system; it is
available on Linux.

## Installation

```
pip install .
```

## Usage

Start the server. It prints its process ID and then waits for messages
until you interrupt it. It takes no arguments and exits with status 1 if
you give it any.

```
minitalk-server
```

```
Server PID: 41235
```

In another terminal, send a message to that PID:

```
minitalk-client 41235 "Hello, world"
```

When every bit has been acknowledged, the client prints `Successful.` and
the server prints `Hello, world`.

The client exits with status 1, without printing anything, in these
cases:

- it was not given exactly two arguments;
- the PID is not an integer, or it is negative;
- a signal could not be delivered;
- the message contains a NUL character.

## Library use

The encoding and decoding work without signals:

```python
from minitalk.protocol import BitDecoder, message_to_bits

decoder = BitDecoder()
for bit in message_to_bits("hi"):
    message = decoder.feed(bit, sender=1234)
print(message)  # b'hi'
```

`BitDecoder.feed` returns `None` until the terminating zero byte arrives.
It then returns the message as `bytes`, without the terminator.
`char_to_bits` gives the eight bits of a single byte, and `MessageBuffer`
accumulates bytes until `take()` returns and empties them.

`minitalk.server.Server` and `minitalk.client.Client` apply this protocol
to real signal delivery. Both accept replacement callables for sending,
waiting or acknowledging, so you can drive them in tests without sending
signals. `Client` also works as a context manager that restores the
signal mask when the block exits.

The package also includes these helper modules:

- `minitalk.strutil` and `minitalk.strsearch`: string helpers that treat
  text as ending at its first NUL character, for example `split_words`,
  `bounded_copy`, `find_substring`, `trim` and `substring`.
- `minitalk.memory`: byte-buffer helpers such as `fill`, `copy_bytes`,
  `move_bytes`, `find_byte` and `compare_bytes`.
- `minitalk.linkedlist`: a singly linked list, `LinkedList`, built from
  `Node`s.
- `minitalk.linereader`: `LineReader` and `get_next_line`, which read
  newline-terminated lines from a file descriptor.
- `minitalk.output`: `put_char`, `put_text`, `put_line` and `put_number`,
  which write to a file descriptor.
- `minitalk.formatspec`: `parse_spec` and `tokenize_format`, which split a
  printf-style format string into literal text and `FormatSpec` objects.

## What it does not do

`minitalk.formatspec` only parses format strings. It does not render
values into formatted text, because the package has no printf-style
formatter. Messages themselves are always written out as raw bytes.

## Running the tests

```
pip install ".[test]"
pytest
```