#!/usr/bin/env python

# -----------------------------------------------------------------------------
# Copyright (c) 2020 J. Matt Roberts
#
# This program is free software; you can redistribute it and/or
# modify it under the terms of the GNU General Public License
# as published by the Free Software Foundation; either version 2
# of the License, or (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program; if not, write to the
# Free Software Foundation, Inc., 51 Franklin Street, Fifth Floor,
# Boston, MA  02110-1301, USA.
# -----------------------------------------------------------------------------


import argparse
import logging
import os
import sys

from rich.console import Console
from . import __about__
from .const import DEFAULT_DEVICE_ID
from .const import DEFAULT_STORE_DIR
from .const import DEFAULT_TIMEOUT
from .const import SLASH_OPTIONS
from .settings import Settings
from .settings import store_dir
from .settings import timeout
from .hdhr import errors
from .hdhr.devices import Devices
from .interpreter import Interpreter
from .presentation import ConsoleView
from .session import Session
from .store import PersistenceError
from .store import PolicyStore

logger = None


class LessThanFilter(logging.Filter):

    def __init__(self, exclusive_maximum, name=''):
        super(LessThanFilter, self).__init__(name)
        self.max_level = exclusive_maximum

    def filter(self, record):
        return(1 if record.levelno < self.max_level else 0)

# End LessThanFilter


class CustomLogFormatter(logging.Formatter):

    def __init__(self):
        # If attached to systemd journal, let it take care of log timestamps
        if 'JOURNAL_STREAM' in os.environ:
            self.FORMATS = {
                logging.DEBUG: '%(msg)s',
                logging.INFO: '%(msg)s',
                logging.WARNING: '%(levelname)s %(msg)s',
                logging.ERROR: '%(levelname)s %(msg)s',
                logging.CRITICAL: '%(levelname)s %(msg)s',
                }
        else:
            self.FORMATS = {
                logging.DEBUG: '%(asctime)s %(msg)s',
                logging.INFO: '%(asctime)s %(msg)s',
                logging.WARNING: '%(asctime)s %(levelname)s %(msg)s',
                logging.ERROR: '%(asctime)s %(levelname)s %(msg)s',
                logging.CRITICAL: '%(asctime)s %(levelname)s %(msg)s',
                }

    def format(self, record):
        formatter = logging.Formatter(self.FORMATS.get(record.levelno))
        return(formatter.format(record))

# End CustomLogFormatter


def configure_loggers(quiet=False, verbose=False):

    global logger

    logger = logging.getLogger()
    if verbose:
        logger.setLevel(logging.DEBUG)
    elif quiet:
        logger.setLevel(logging.WARNING)
    else:
        logger.setLevel(logging.INFO)
    custom_formatter = CustomLogFormatter()

    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.setFormatter(custom_formatter)
    stdout_handler.setLevel(logging.DEBUG)
    stdout_handler.addFilter(LessThanFilter(logging.WARNING))
    logger.addHandler(stdout_handler)

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setFormatter(custom_formatter)
    stderr_handler.setLevel(logging.WARNING)
    logger.addHandler(stderr_handler)

    logging.getLogger('requests').setLevel(logging.WARNING)
    logging.getLogger('urllib3').setLevel(logging.WARNING)

# End configure_loggers


def normalize_argv(argv):
    """Translates the /simulate, /verbose and /cmd forms to long options"""

    normalized = []
    for arg in argv:
        normalized.append(SLASH_OPTIONS.get(arg.lower(), arg))
    return(normalized)

# End normalize_argv


def parse_args(argv):

    parser = argparse.ArgumentParser(prog=__about__.__name__,
                                     description=__about__.__description__
                                     )

    parser.add_argument(
      '-d', '--device-id', metavar='DEVICE_ID|IP|HOSTNAME',
      help='ID, IP address, or hostname of the DVR to manage. Default is '
      f'"{DEFAULT_DEVICE_ID}" which picks the first storage device found '
      'by discovery.'
      )

    parser.add_argument(
      '-f', '--conf-file', metavar='FILE', type=argparse.FileType('r'),
      help='Path to configuration file. The configuration file supports '
      'overriding the built-in defaults as well as per-device settings. '
      'See example. Options given on the command-line override those in '
      'the configuration file.'
      )

    parser.add_argument(
      '-s', '--store-dir', metavar='DIRECTORY', type=store_dir,
      help='Directory holding the keep and protect settings of each device. '
      f'Default is "{DEFAULT_STORE_DIR}". '
      'This can be set per-device in the configuration file.'
      )

    parser.add_argument(
      '-t', '--timeout', metavar='SECONDS', type=timeout,
      help='Number of seconds to wait for the device to respond. Default is '
      f'{DEFAULT_TIMEOUT}.'
      )

    parser.add_argument(
      '-n', '--simulate', action='store_true',
      help='Start in simulation mode. Recordings that would be deleted are '
      'reported, but none are actually deleted. Use the "sim" command to '
      'turn simulation on or off. Also accepted as /simulate.'
      )

    parser.add_argument(
      '-c', '--cmd', metavar='COMMAND',
      help='Run a single command (e.g., "ser * clean") and exit instead of '
      'prompting for commands. Also accepted as /cmd.'
      )

    parser.add_argument(
      '-V', '--version', action='store_true',
      help='Show version number and exit.'
      )

    verbose_group = parser.add_mutually_exclusive_group()

    verbose_group.add_argument(
      '-q', '--quiet', action='store_true',
      help='Suppress all messages except errors.'
      )

    verbose_group.add_argument(
      '-v', '--verbose', action='store_true',
      help='Print more informational messages and show the synopsis of '
      'each recording. Also accepted as /verbose.'
      )

    args = parser.parse_args(argv)
    return(args)

# End parse_args


def open_session(settings, console):
    """Finds the device and loads its series and recordings. Exits with
    status 1 if that isn't possible."""

    global_settings = settings['global']
    try:
        devices = Devices(global_settings['timeout'])
        device = devices.find(global_settings['device_id'])
    except errors.HDHomeRunException as e:
        logger.error(e)
        sys.exit(1)

    device_settings = settings[f'device:{device.key}']
    session = Session(device,
                      PolicyStore(device.key, device_settings['store_dir']),
                      simulate=device_settings['simulate'],
                      verbose=global_settings['verbose']
                      )
    logger.debug(f'Using {device}')

    try:
        with console.status('Initializing...') as status:
            session.initialize(progress=status.update)
    except (errors.HDHomeRunException, PersistenceError) as e:
        logger.error(f'Unable to initialize {device}: {e}')
        sys.exit(1)

    return(session)

# End open_session


def prompt(session):

    text = '\n[green3 on black]HDHomeRun'
    if session.simulate:
        text += ' ([white on red]sim[/])'
    if session.verbose:
        text += ' ([white on grey50]ver[/])'
    text += ' >[/] '
    return(text)


def run_prompt(interpreter, console):

    done = False
    while not done:
        try:
            line = console.input(prompt(interpreter.session))
        except EOFError:
            console.print()
            break
        done = interpreter.process(line)

# End run_prompt


def main():

    global logger

    try:
        args = parse_args(normalize_argv(sys.argv[1:]))

        if args.version:
            print(f'{__about__.__name__} {__about__.__version__}')
            sys.exit()

        configure_loggers(args.quiet, args.verbose)

        conf_file_path = None
        if args.conf_file is not None:
            conf_file_path = args.conf_file.name
            args.conf_file.close()
        settings = Settings(args, conf_file_path)

        console = Console()
        view = ConsoleView(console)
        session = open_session(settings, console)
        if session.simulate:
            logger.warning('Simulation is on. No recordings will be deleted, '
                           'even if messages indicate otherwise.'
                           )
        interpreter = Interpreter(session, view)

        if args.cmd is not None:
            interpreter.process(args.cmd)
            return()

        view.show_banner(session.device)
        interpreter.process('ser')
        run_prompt(interpreter, console)

    except ValueError as value_err:
        logger.error(value_err)
        sys.exit(2)
    except KeyboardInterrupt:
        print()
        sys.exit()
    except BrokenPipeError:
        sys.exit()

# End main()


if __name__ == '__main__':
    main()

# vim: set tabstop=8 softtabstop=0 expandtab shiftwidth=4 smarttab ai :
