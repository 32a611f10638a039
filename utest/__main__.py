#!/usr/bin/env python3
# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from argparse import ArgumentParser
from os import environ, getcwd, walk
from os.path import isfile, join as path_join
from subprocess import run
from sys import executable
from typing import Iterator


def main() -> None:
  arg_parser = ArgumentParser(prog='utest', description='Find and run utest unit tests with the extension ".ut.py", defaulting to "test/".')
  arg_parser.add_argument('paths', nargs='*', default=['test'])
  args = arg_parser.parse_args()

  env = dict(environ)
  work_dir = getcwd()
  env['PYTHONPATH'] = work_dir + (':' + env['PYTHONPATH'] if env.get('PYTHONPATH') else '')

  ok = True
  count = 0
  for path in walk_test_files(args.paths):
    print(path)
    count += 1
    c = run([executable, path], env=env).returncode
    if c != 0:
      ok = False
      print()

  if not count:
    print('utest: no ".ut.py" files found in:', *args.paths)
  exit(0 if ok else 1)


def walk_test_files(paths:list[str]) -> Iterator[str]:
  'Yield paths ending in ".ut.py", in sorted order within each directory.'
  for path in paths:
    if isfile(path):
      yield path
      continue
    for dir, dir_names, file_names in walk(path):
      dir_names.sort()
      for name in sorted(file_names):
        if name.endswith('.ut.py'): yield path_join(dir, name)


if __name__ == '__main__': main()
