#!/usr/bin/env python3
"""
Fixed lookup tables for the simulated shell.

Help text, manual pages, the default package catalog and the canned output
of the decorative system-inspection commands. All of it is illustrative and
never changes at runtime.
"""

from types import MappingProxyType


# Package manager

AVAILABLE_PACKAGES = (
    'nginx', 'apache2', 'mysql', 'postgresql', 'nodejs',
    'python3', 'git', 'vim', 'curl', 'wget',
)

PACKAGE_VERSIONS = MappingProxyType({
    'nginx': 'nginx version: nginx/1.18.0 (Ubuntu)',
    'apache2': 'Server version: Apache/2.4.41 (Ubuntu)',
    'mysql': 'mysql  Ver 8.0.35 for Linux on x86_64 (MySQL Community Server - GPL)',
    'postgresql': 'psql (PostgreSQL) 12.17',
    'nodejs': 'v12.22.9',
    'python3': 'Python 3.8.10',
    'git': 'git version 2.25.1',
    'vim': 'VIM - Vi IMproved 8.1 (2018 May 18, compiled Jan 01 2024 00:00:00)',
    'curl': 'curl 7.68.0 (x86_64-pc-linux-gnu) libcurl/7.68.0',
    'wget': 'GNU Wget 1.20.3 built on linux-gnu.',
})


# Help system

GENERAL_HELP = (
    'Available commands:',
    '',
    '  ls [options] [path]    - List directory contents (-a, -l)',
    '  cd <path>              - Change directory',
    '  pwd                    - Print working directory',
    '  cat <file>             - Display file contents',
    '  echo <text> [> file]   - Print text or write to file',
    '  mkdir <dir>            - Create directory',
    '  touch <file>           - Create empty file',
    '  rm [-r] <file>         - Remove file or directory',
    '  chmod <mode> <file>    - Change file permissions',
    '  grep <pattern> <file>  - Search for pattern in file',
    '  find <path> -name <n>  - Search for files by name',
    '  du [-h] [-s] [path]    - Show disk usage',
    '  tar -cf <archive> <p>  - Create an archive',
    '  nano/vim <file>        - Edit file',
    '  apt <command>          - Package manager (install, remove, list, search, update)',
    '  ./<script>             - Execute script',
    '  ps, top, free, df      - Inspect the system',
    '  ifconfig, ping <host>  - Inspect the network',
    '  man <command>          - Show a manual page',
    '  clear                  - Clear terminal',
    '  whoami                 - Display current user',
    '  date                   - Display current date/time',
    '  history                - Show command history',
    '  hint                   - Get a hint (costs points)',
    '',
    "Type 'help <command>' for details on a specific command.",
)

# name -> (summary, synopsis, description lines, example lines)
HELP_PAGES = MappingProxyType({
    'ls': (
        'list directory contents',
        'ls [-a] [-l] [PATH]',
        ('List the entries of PATH, or of the current directory.',
         '-a  include hidden entries (names starting with .)',
         '-l  long format: permissions, owner, size and name'),
        ('ls', 'ls -la /tmp', 'ls ~/documents'),
    ),
    'cd': (
        'change the current directory',
        'cd [PATH]',
        ('Move to PATH. Without an argument, return to the home directory.',
         'PATH may be absolute, relative, ~ or contain . and ..'),
        ('cd /var/log', 'cd ..', 'cd ~'),
    ),
    'pwd': (
        'print the current directory',
        'pwd',
        ('Print the absolute path of the current working directory.',),
        ('pwd',),
    ),
    'cat': (
        'print file contents',
        'cat FILE...',
        ('Print the contents of each FILE in order.',),
        ('cat notes.txt', 'cat /etc/hosts /etc/hostname'),
    ),
    'echo': (
        'print text or write it to a file',
        'echo TEXT [> FILE | >> FILE]',
        ('Print TEXT. With > the text replaces the contents of FILE,',
         'with >> it is appended. Either form creates FILE if needed.'),
        ('echo hello', 'echo "done" > /tmp/status.txt', 'echo "more" >> log.txt'),
    ),
    'mkdir': (
        'create directories',
        'mkdir DIRECTORY...',
        ('Create each DIRECTORY. The parent directory must already exist.',),
        ('mkdir projects', 'mkdir /tmp/a /tmp/b'),
    ),
    'touch': (
        'create empty files',
        'touch FILE...',
        ('Create each FILE if it does not exist. Existing files are left as they are.',),
        ('touch notes.txt', 'touch /tmp/marker'),
    ),
    'rm': (
        'remove files or directories',
        'rm [-r] [-f] TARGET...',
        ('Remove each TARGET. Directories need -r.',
         '-r  remove directories and their contents',
         '-f  ignore targets that do not exist'),
        ('rm old.txt', 'rm -r /tmp/cache', 'rm -rf build'),
    ),
    'chmod': (
        'change file permissions',
        'chmod MODE FILE...',
        ('Change the mode of each FILE. Supported modes:',
         '+x, 755, 777  make the file executable (rwxr-xr-x)',
         '-x, 644       make the file non-executable (rw-r--r--)'),
        ('chmod +x deploy.sh', 'chmod 644 notes.txt'),
    ),
    'grep': (
        'search files for a pattern',
        'grep PATTERN FILE...',
        ('Print the lines of each FILE that contain PATTERN, ignoring case.',
         'With several files, each match is prefixed with its file name.'),
        ('grep error /var/log/syslog', 'grep TODO a.txt b.txt'),
    ),
    'find': (
        'search for files by name',
        'find [PATH] -name PATTERN',
        ('Walk PATH and print every entry whose name contains PATTERN.',
         'Wildcards (*) are ignored.'),
        ('find / -name secret', 'find /var -name "*.log"'),
    ),
    'du': (
        'estimate disk usage',
        'du [-h] [-s] [PATH...]',
        ('Show the size of each entry in PATH and the total.',
         '-h  human-readable sizes (B, K, M, G)',
         '-s  only show the total'),
        ('du /var', 'du -sh /var/log'),
    ),
    'tar': (
        'create an archive',
        'tar -cf ARCHIVE SOURCE',
        ('Create ARCHIVE from the file or directory SOURCE.',),
        ('tar -cf /tmp/backup.tar /home/user/project',),
    ),
    'nano': (
        'edit a file',
        'nano FILE  (also vim, vi)',
        ('Open FILE in the editor. New files are created on save.',
         'Ctrl+S saves, Ctrl+X closes the editor.'),
        ('nano config.txt', 'vim /etc/hosts'),
    ),
    'apt': (
        'package manager',
        'apt install|remove|list|search|update [PACKAGE...]',
        ('install PKG...     install packages',
         'remove PKG...      remove installed packages',
         'list [--installed] list available or installed packages',
         'search QUERY       search the package catalog',
         'update             refresh the package lists'),
        ('apt update', 'apt install nginx', 'apt list --installed'),
    ),
    'history': (
        'show command history',
        'history',
        ('Print every command entered in this session, numbered.',),
        ('history',),
    ),
    'man': (
        'show manual pages',
        'man COMMAND',
        ('Show the manual page for COMMAND.',),
        ('man ls',),
    ),
    'ps': (
        'list running processes',
        'ps [aux]',
        ('Show a snapshot of the running processes.',),
        ('ps', 'ps aux'),
    ),
    'df': (
        'report filesystem disk space',
        'df [-h]',
        ('Show used and available space on each mounted filesystem.',),
        ('df', 'df -h'),
    ),
    'free': (
        'show memory usage',
        'free [-h]',
        ('Show total, used and free memory.',),
        ('free', 'free -h'),
    ),
    'top': (
        'show system load and processes',
        'top  (also htop)',
        ('Show CPU and memory load and the busiest processes.',),
        ('top', 'htop'),
    ),
    'ifconfig': (
        'show network interfaces',
        'ifconfig',
        ('Show the configuration of each network interface.',),
        ('ifconfig',),
    ),
    'ping': (
        'test network connectivity',
        'ping HOST',
        ('Send echo requests to HOST and report the replies.',),
        ('ping localhost', 'ping example.com'),
    ),
})

MAN_PAGES = MappingProxyType({
    'ls': ('LS(1)', '', 'NAME', '       ls - list directory contents', '',
           'SYNOPSIS', '       ls [OPTION]... [FILE]...', '',
           'OPTIONS', '       -a     do not ignore entries starting with .',
           '       -l     use a long listing format'),
    'cd': ('CD(1)', '', 'NAME', '       cd - change directory', '',
           'SYNOPSIS', '       cd [DIR]', '',
           'DESCRIPTION', '       Change the current directory to DIR.'),
    'cat': ('CAT(1)', '', 'NAME', '       cat - concatenate files and print', '',
            'SYNOPSIS', '       cat [FILE]...'),
})


# Canned system inspection output

PS_OUTPUT = (
    '    PID TTY          TIME CMD',
    '   1042 pts/0    00:00:00 bash',
    '   1187 pts/0    00:00:00 ps',
)

PS_AUX_OUTPUT = (
    'USER         PID %CPU %MEM    VSZ   RSS TTY      STAT START   TIME COMMAND',
    'root           1  0.0  0.1 167744 11520 ?        Ss   08:00   0:02 /sbin/init',
    'root         412  0.0  0.0  15420  6912 ?        Ss   08:00   0:00 /usr/sbin/sshd -D',
    'root         523  0.0  0.0   9412  2816 ?        Ss   08:00   0:00 /usr/sbin/cron -f',
    'syslog       530  0.0  0.0 224344  5120 ?        Ssl  08:00   0:00 /usr/sbin/rsyslogd -n',
    'www-data     611  0.1  0.2  55280  8448 ?        S    08:01   0:01 nginx: worker process',
    'mysql        702  0.5  4.1 1732144 337920 ?      Ssl  08:01   0:42 /usr/sbin/mysqld',
    'user        1042  0.0  0.0  10144  5376 pts/0    Ss   09:12   0:00 -bash',
    'user        1187  0.0  0.0  10808  3456 pts/0    R+   09:15   0:00 ps aux',
)

FREE_OUTPUT = (
    '              total        used        free      shared  buff/cache   available',
    'Mem:        8152044     2345124     3456780      123456     2350140     5432100',
    'Swap:       2097148           0     2097148',
)

FREE_HUMAN_OUTPUT = (
    '              total        used        free      shared  buff/cache   available',
    'Mem:          7.8Gi       2.2Gi       3.3Gi       120Mi       2.2Gi       5.2Gi',
    'Swap:         2.0Gi          0B       2.0Gi',
)

DF_OUTPUT = (
    'Filesystem     1K-blocks     Used Available Use% Mounted on',
    '/dev/sda1       41152736 18734560  20304632  48% /',
    'tmpfs            4076020        0   4076020   0% /dev/shm',
    '/dev/sda2      102687672 61612603  35832260  64% /var',
)

DF_HUMAN_OUTPUT = (
    'Filesystem      Size  Used Avail Use% Mounted on',
    '/dev/sda1        40G   18G   20G  48% /',
    'tmpfs           3.9G     0  3.9G   0% /dev/shm',
    '/dev/sda2        98G   59G   35G  64% /var',
)

TOP_OUTPUT = (
    'top - 09:15:42 up 1:15,  1 user,  load average: 0.15, 0.10, 0.05',
    'Tasks:  98 total,   1 running,  97 sleeping,   0 stopped,   0 zombie',
    '%Cpu(s):  2.3 us,  0.7 sy,  0.0 ni, 96.8 id,  0.2 wa,  0.0 hi,  0.0 si',
    'MiB Mem :   7961.0 total,   3375.8 free,   2290.2 used,   2295.1 buff/cache',
    'MiB Swap:   2048.0 total,   2048.0 free,      0.0 used.   5304.8 avail Mem',
    '',
    '    PID USER      PR  NI    VIRT    RES    SHR S  %CPU  %MEM     TIME+ COMMAND',
    '    702 mysql     20   0 1732144 337920  35840 S   0.5   4.1   0:42.17 mysqld',
    '    611 www-data  20   0   55280   8448   5632 S   0.1   0.1   0:01.03 nginx',
    '      1 root      20   0  167744  11520   8320 S   0.0   0.1   0:02.51 systemd',
    '   1042 user      20   0   10144   5376   3584 S   0.0   0.1   0:00.04 bash',
)

IFCONFIG_OUTPUT = (
    'eth0: flags=4163<UP,BROADCAST,RUNNING,MULTICAST>  mtu 1500',
    '        inet 192.168.1.100  netmask 255.255.255.0  broadcast 192.168.1.255',
    '        inet6 fe80::a00:27ff:fe4e:66a1  prefixlen 64  scopeid 0x20<link>',
    '        ether 08:00:27:4e:66:a1  txqueuelen 1000  (Ethernet)',
    '        RX packets 48213  bytes 52138812 (52.1 MB)',
    '        TX packets 21034  bytes 2843310 (2.8 MB)',
    '',
    'lo: flags=73<UP,LOOPBACK,RUNNING>  mtu 65536',
    '        inet 127.0.0.1  netmask 255.0.0.0',
    '        inet6 ::1  prefixlen 128  scopeid 0x10<host>',
    '        loop  txqueuelen 1000  (Local Loopback)',
    '        RX packets 512  bytes 43008 (43.0 KB)',
    '        TX packets 512  bytes 43008 (43.0 KB)',
)

PING_OUTPUT = (
    'PING {host} (127.0.0.1) 56(84) bytes of data.',
    '64 bytes from {host} (127.0.0.1): icmp_seq=1 ttl=64 time=0.045 ms',
    '64 bytes from {host} (127.0.0.1): icmp_seq=2 ttl=64 time=0.052 ms',
    '64 bytes from {host} (127.0.0.1): icmp_seq=3 ttl=64 time=0.048 ms',
    '64 bytes from {host} (127.0.0.1): icmp_seq=4 ttl=64 time=0.050 ms',
    '',
    '--- {host} ping statistics ---',
    '4 packets transmitted, 4 received, 0% packet loss, time 3004ms',
    'rtt min/avg/max/mdev = 0.045/0.048/0.052/0.002 ms',
)
