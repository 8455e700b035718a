__name__ = 'hdhr_dvr_manager'
__description__ = ('Manage recordings on HDHomeRun SCRIBE, SERVIO, and RECORD '
                   'devices. Keep only a certain number of episodes per '
                   'series, protect favorite recordings from deletion, and '
                   'delete recordings on demand from an interactive prompt.'
                   )
__version__ = "1.0.0"
__url__ = 'https://github.com/jmattroberts/hdhr-dvr-manager'
__author__ = 'J. Matt Roberts'
__email__ = 'hdhr.disk.space.monitor@gmail.com'
__license__ = 'GPLv2+'
__copyright__ = f'2020 {__author__}'
