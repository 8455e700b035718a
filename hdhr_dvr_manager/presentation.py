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


from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from hdhr_dvr_manager.util import decimalsize
from hdhr_dvr_manager.util import duration
from hdhr_dvr_manager.util import localtime

KEEP_ALL_SYMBOL = '∞'
PROTECTED_SYMBOL = '∞'


def paint(value, color='yellow'):
    return(f'[{color}]{escape(str(value))}[/]')


def seq_cell(seq, deleted=False):
    return(f"[white on {'red' if deleted else 'blue'}]{seq:02d}[/]")


class ConsoleView:
    """Renders listings on a rich Console"""

    def __init__(self, console=None):
        self.console = console or Console()

    def message(self, text):
        self.console.print(text, markup=False, highlight=False)

    def notice(self, text):
        self.console.print(paint(text, 'white'))

    def error(self, text):
        self.console.print(paint(text, 'red'))

    def total(self, count):
        self.console.print(f' [[white on red]{count:02d}[/]]')

    def show_banner(self, device):
        self.console.print(paint(f'{device.friendly_name} [{device.key}] @ '
                                 f'{device.base_url}',
                                 'green3'
                                 ))

    def show_series(self, series_list):
        table = Table(title='[bold cyan]Series[/]', box=box.HORIZONTALS)
        table.add_column('Seq')
        table.add_column('Title', min_width=10)
        table.add_column('Series ID')
        table.add_column('Category', justify='right')
        table.add_column('Recordings', justify='right')
        table.add_column('Keep', justify='right')

        for series in series_list:
            recording_count = len(series.recordings)
            color = 'green3'
            if (series.keep_count is not None
                    and recording_count > series.keep_count):
                color = 'red'

            keep = ''
            if series.protected_count > 0:
                keep += f'({paint(series.protected_count, "cyan")}) '
            if series.keeps_all:
                keep += paint(KEEP_ALL_SYMBOL, 'white')
            else:
                keep += paint(series.keep_count, 'green3')

            table.add_row(seq_cell(series.seq),
                          paint(series.title),
                          paint(series.series_id),
                          paint(series.category, 'cyan'),
                          paint(recording_count, color),
                          keep
                          )

        self.console.print(table)
        self.total(len(series_list))

    def show_recordings(self, series, eligible=(), file_size=None,
                        verbose=False):
        """Recordings of one series. Recordings in eligible are shown in
        red, protected ones in green."""

        if not series.recordings:
            self.notice(f'There are no recordings for {series.title}')
            return()

        table = Table(title=f'[bold cyan]{escape(series.title)}[/]',
                      box=box.HORIZONTALS
                      )
        table.add_column('Seq', no_wrap=True)
        table.add_column('Start Time', no_wrap=True)
        table.add_column('Episode')
        table.add_column('Title', min_width=10)
        table.add_column('Length', justify='right')
        table.add_column('Size', justify='right')
        table.add_column('W')

        for recording in series.recordings:
            if recording.protected:
                color = 'green3'
            elif recording in eligible:
                color = 'red'
            else:
                color = 'yellow'

            seq = seq_cell(recording.seq, recording.deleted)
            seq += f' [white]{PROTECTED_SYMBOL}[/]' if recording.protected \
                else ' '
            size = file_size(recording) if file_size is not None \
                else recording.file_size
            length = recording.recorded_seconds
            table.add_row(seq,
                          paint(localtime(recording.start_time), color),
                          paint(recording.episode_number or '?', color),
                          paint(recording.episode_title or series.title,
                                color),
                          paint(duration(length) if length is not None
                                else '', color),
                          paint(decimalsize(size), color),
                          'W' if recording.is_watched else ''
                          )
            if verbose and recording.synopsis:
                table.add_row('', '', '', paint(recording.synopsis, 'grey50'))

        self.console.print(table)
        self.total(len(series.recordings))

    def show_new_recordings(self, recordings, series_titles):
        table = Table(title=f'[bold cyan]Newest {len(recordings)} '
                            'Recordings[/]',
                      box=box.HORIZONTALS
                      )
        table.add_column('Seq', no_wrap=True)
        table.add_column('Series', min_width=10)
        table.add_column('Start Time', no_wrap=True)
        table.add_column('Episode')
        table.add_column('Title', min_width=10)

        for seq, recording in enumerate(recordings, start=1):
            cell = seq_cell(seq, recording.deleted)
            cell += f' [white]{PROTECTED_SYMBOL}[/]' if recording.protected \
                else ' '
            table.add_row(cell,
                          paint(series_titles.get(recording.series_id,
                                                  recording.series_title)),
                          paint(localtime(recording.start_time)),
                          paint(recording.episode_number or '?'),
                          paint(recording.episode_title)
                          )

        self.console.print(table)

    def show_channels(self, channels):
        table = Table(title='[bold cyan]Channels[/]', box=box.HORIZONTALS)
        table.add_column('Seq')
        table.add_column('Guide #', justify='right')
        table.add_column('Guide Name')
        table.add_column('A/V Codecs')
        table.add_column('URL')

        for channel in channels:
            table.add_row(seq_cell(channel.seq),
                          escape(channel.guide_number),
                          escape(channel.guide_name),
                          escape(channel.codecs),
                          escape(channel.url)
                          )

        self.console.print(table)
        self.total(len(channels))

    def show_rules(self, rules):
        table = Table(title='[bold cyan]Recording Rules[/]',
                      box=box.HORIZONTALS
                      )
        table.add_column('Prio', justify='center')
        table.add_column('Title', min_width=10)
        table.add_column('Series ID')
        table.add_column('Category', justify='right')
        table.add_column('Channel Only', justify='center')
        table.add_column('Recents?', justify='center')

        for rule in rules:
            table.add_row(seq_cell(rule.priority),
                          paint(rule.title),
                          paint(rule.series_id),
                          paint(rule.category, 'cyan'),
                          paint(rule.channel_only or 'N/A', 'green3'),
                          'Yes' if rule.recent_only else paint('No', 'red')
                          )

        self.console.print(table)

    def show_status(self, statuses):
        table = Table(title='[bold cyan]Status[/]')
        table.add_column('Resource')
        table.add_column('Channel/Name')
        table.add_column('Call Sign')
        table.add_column('Target')

        for status in statuses:
            table.add_row(paint(status.resource),
                          paint(status.description),
                          paint(status.vct_name, 'cyan'),
                          paint(status.target_ip, 'green3')
                          )

        self.console.print(table)

    def show_device_info(self, device):
        table = Table()
        for column in ('Friendly Name', 'Model Number', 'Device ID',
                       'Device Auth', 'Tuners'):
            table.add_column(column)
        table.add_row(paint(device.friendly_name),
                      paint(device.model_number),
                      paint(device.id),
                      paint(device.device_auth or ''),
                      paint(device.tuner_count)
                      )
        self.console.print(table)

        table = Table()
        for column in ('Base URL', 'Local IP', 'Firmware Name',
                       'Firmware Version'):
            table.add_column(column)
        table.add_row(paint(device.base_url),
                      paint(device.ip_addr),
                      paint(device.firmware_name),
                      paint(device.firmware_version)
                      )
        self.console.print(table)

        table = Table()
        table.add_column('Discover URL')
        table.add_column('Lineup URL')
        table.add_row(paint(device.discover_url), paint(device.lineup_url))
        self.console.print(table)

        table = Table()
        table.add_column('Storage URL / Storage ID')
        table.add_column('Total')
        table.add_column('Used')
        table.add_column('Free')
        if device.total_space and device.used_space is not None:
            used_pct = (device.used_space / device.total_space) * 100
            free_pct = (device.free_space / device.total_space) * 100
            table.add_row(paint(f'{device.storage_url}\n{device.storage_id}'),
                          paint(decimalsize(device.total_space)),
                          paint(f'{decimalsize(device.used_space)} '
                                f'({used_pct:.1f}%)'),
                          paint(f'{decimalsize(device.free_space)} '
                                f'({free_pct:.1f}%)', 'green3')
                          )
        else:
            table.add_row(paint(f'{device.storage_url}\n{device.storage_id}'),
                          '?', '?', '?'
                          )
        self.console.print(table)

    def show_log(self, entries):
        table = Table(title='[bold cyan]Log[/]', box=box.HORIZONTALS)
        table.add_column('Timestamp', no_wrap=True)
        table.add_column('Message')

        for entry in entries:
            table.add_row(paint(localtime(entry.timestamp,
                                          '%d-%b-%y %I:%M:%S %p'), 'cyan'),
                          paint(entry.message)
                          )

        self.console.print(table)

    def show_help(self):
        table = Table(title='[bold cyan]Help[/]')
        table.add_column('Command')
        table.add_column('Description')
        table.add_row('help, ?', 'Shows this help')
        table.add_row('info', 'Shows detailed information about your '
                              'HDHomeRun')
        table.add_row('chan', 'Shows details about all of your channels '
                              '(chan -f to refresh)')
        table.add_row('log', 'Show the log')
        table.add_row('log -save', 'Save the log to a file with current '
                                   'timestamp')
        table.add_row('log abc', 'Search the log for text matching abc')
        table.add_row('new', 'Shows all the recordings (newest first)')
        table.add_row('new #', 'Shows the newest # recordings')
        table.add_row('rules', 'Show the recording rules')
        table.add_row('ser', 'Show information about series and recordings')
        table.add_row('ser ?', 'Show detailed help about the ser command')
        table.add_row('sim', 'Turn simulation on or off. When on, nothing '
                             'will be deleted')
        table.add_row('status', 'Show the current status of the device')
        table.add_row('ver', 'Turn verbose on or off. If a recording has a '
                             'synopsis, it will be displayed')
        table.add_row('quit, q', 'Quits the application')
        self.console.print(table)

    def show_series_help(self):
        table = Table(title='[bold cyan]Series Help[/]')
        table.add_column('Command')
        table.add_column('Example(s)')
        table.add_column('Details')
        rows = [
          ('ser ?', 'ser ?', 'Shows this help'),
          ('ser', 'ser', 'Show all the series'),
          ('ser #', 'ser 2', 'For series 2, show all recordings'),
          ('', 'ser *', 'For all series, show all recordings'),
          ('ser # del @', 'ser 9 del 3', 'For series 9 delete recording 3'),
          ('', 'ser 8 del *', 'For series 8 delete all recordings'),
          ('ser # keep @', 'ser 4 keep 5',
           'For series 4 keep at most 5 recordings'),
          ('', 'ser 7 keep *', 'For series 7 keep all recordings'),
          ('ser # protect @', 'ser 2 protect 6',
           'Toggle protection for series 2 recording 6'),
          ('', 'ser 3 protect *',
           'Toggle protection for all recordings of series 3'),
          ('ser # clean', 'ser 3 clean',
           'Remove any recordings for series 3 beyond what should be kept'),
          ('', 'ser * clean', 'Clean up recordings for all series'),
          ]
        for command, example, details in rows:
            table.add_row(escape(command), paint(example, 'white'),
                          paint(details, 'green3'))
        self.console.print(table)

# vim: set tabstop=8 softtabstop=0 expandtab shiftwidth=4 smarttab ai :
