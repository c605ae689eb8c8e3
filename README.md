# sigtalk

sigtalk carries text from one process to another using only two POSIX
signals. The text is sent as its UTF-8 bytes, each byte as eight bits, most
significant bit first: `SIGUSR1` stands for a 0 bit and `SIGUSR2` for a 1 bit.
A NUL byte ends the message, and the server then prints a newline.

It works on POSIX systems only, because it relies on `SIGUSR1`, `SIGUSR2`
and `signal.pause()`.

## Installation

```
pip install .
```

## Usage

Start the server. It prints its process id and then waits for signals until
it is interrupted (Ctrl-C), after which it restores the previous signal
handlers and exits with status 0:

```
$ sigtalk-server
Server PID: 4242
```

From another terminal, send a message to that process id:

```
$ sigtalk-client 4242 "hello there"
```

The server prints `hello there` followed by a newline. The client pauses
0.1 ms after each signal so that the server can keep up.

The client prints `Error` and exits with status 1 when:

- it is not given exactly two arguments,
- the process id does not parse to a positive number (parsing accepts leading
  whitespace and one sign, and stops at the first non-digit),
- sending fails, for example because no such process exists or the message
  contains a NUL character.

## What it does not do

The server sends nothing back: the client gets no acknowledgement, and there
is no check that a message arrived intact. If several clients send at the
same time their bits are mixed together.

## Library use

The bit encoding can be used without sending any signals:

```python
from sigtalk.protocol import encode_message, decode_bits, CharAssembler

bits = list(encode_message("hi"))   # 24 bits: 'h', 'i', then the NUL byte
decode_bits(bits)                   # b"hi\n"

assembler = CharAssembler()
for bit in bits:
    byte = assembler.push(bit)      # a completed byte every eighth bit, else None
```

`sigtalk.protocol` also has `encode_char` (the eight bits of one byte),
`bit_to_signal` and `signal_to_bit`.

`sigtalk.client` provides `send_bit`, `send_char` and `send_message`, which
signal a process id directly; each takes an optional `delay` in seconds.
`sigtalk.server.SignalReceiver` has a `handle(signum, frame)` method to
install as the handler for both signals; it writes each completed byte to its
`output` binary stream, or to standard output when none is given.

The package also has some small text helpers:

- `sigtalk.formatting.format_message(template, *args)` is a printf-style
  formatter that understands `%c %s %d %i %u %x %X %p %%`, with 32-bit integer
  rules and no flags or widths. `print_formatted(template, *args, file=None)`
  writes the result and returns its length.
- `sigtalk.textutil` holds `atoi`, `itoa`, `split`, `strtrim`, `substr`,
  `strnstr`, `strncmp`, `memcmp`, `strchr`, `strrchr` and `strmapi`; search
  functions return an index or `None`.
- `sigtalk.chars` holds `isalpha`, `isdigit`, `isalnum`, `isascii`, `isprint`,
  `toupper` and `tolower`, for ASCII only, taking a character or an integer
  code.

## Running the tests

```
pip install .[test]
pytest
```