# sitekit

A set of small command-line tools for looking after a personal web site
that is uploaded over FTP.

## Installing

    pip install .

## Commands

### `sitekit-ftpem` and `sitekit-todelphi`

Build an FTP session script that uploads every file matched by the given
patterns, then run `ftp -s:SESSION` on it and delete the script.

    sitekit-ftpem ftp.example.com user password "*.html"
    sitekit-todelphi user password "*.html" "*.jpg"

`sitekit-ftpem` opens a separate connection (login, binary mode, `put`,
`disconnect`) for every file and writes the script to `ftpem.ftp`.
`sitekit-todelphi` logs in to `people.delphi.com` once, changes to the
`web` directory and sends all files over that connection, using
`todelphi.ftp`. A pattern that matches no file stops the command with an
error. Both need an `ftp` program that accepts `-s:FILE` on the `PATH`.

### `sitekit-ftpscript`

Compiles a bracketed site description into FTP commands and prints them.
It reads `test.txt`, or the file named as the first argument:

    site [ user password [ dir mode [ local remote ... ] ... ] ... ]

Each site becomes `o SITE` ... `disconnect`; each user its name and
password lines; each directory a `cd`; a mode starting with `b` gives
`bin`, anything else `ascii`; each file pair a `put LOCAL REMOTE`.
Brackets may be left out where a level has a single entry.

### `sitekit-nav`

Reads a dot-indented outline (`nav.txt`, or the file named first; at most
142 lines) and prints an HTML page with the entries drawn as an ASCII tree
inside a `<PRE>` block. The number of leading dots gives an entry's depth.

### `sitekit-navparse`

Reads a bracketed item list (`test.txt`, or the file named first) and
prints each item as `[+]---ITEM`, indented three spaces per level of
brackets.

### `sitekit-rootname`

Renames the files of a DOS directory listing to a common root name (at
most eight characters) followed by a three-digit number starting at `000`,
keeping each extension.

    dir | sitekit-rootname -z MYCATS
    sitekit-rootname -x MYCATS

`-z` reads the listing from standard input; without it the command runs
`dir` itself. By default the renames are only listed; `-x` carries them
out. `-h` or `-?` shows help.

### `sitekit-webgen`

Reads `BASENAME.tem`, noting which lines hold the keywords `IMAGE`,
`FACING`, `DESCRIPTION`, `MOVEL`, `MOVER`, `FORWARD`, `BACK`,
`TURNLEFT`, `TURNRIGHT` and `TURNAROUND`, then works through
`BASENAME.map`, whose rooms are `north,south,west,east` numbers optionally
followed by override lines. It prints its progress (comments, overrides,
one message per room) and reports a malformed room.

    sitekit-webgen castle

## Library functions

- `sitekit.ipfilter.ip_filter(source, dest, ip, now=None)` copies a text
  stream, replacing the first `*ip*` on a line with the given address or,
  on lines without one, the first `*time*` with the time in `ctime` form.
  `filter_line` does the same for a single line.
- `sitekit.getip.get_ip()` runs `route print` and returns the address found
  in its listing (an empty string if none); it raises `IPLookupError` when
  `route` cannot be run. `parse_route_output(text)` does the parsing alone.
- `sitekit.scanning.skip_stuff(stream)` returns the next character of a
  list file that is neither whitespace nor part of a `*` comment line.

## What it does not do

There is no command that runs the IP macro filter over page templates, and
nothing that builds an FTP session from a profile-matched list of sites and
files: the filter and the address lookup are available only as the library
functions above. `sitekit-webgen` reads templates and maps but does not
write any HTML pages.

## Running the tests

    pip install .[test]
    pytest