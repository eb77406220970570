"""pyad2 command-line interface."""

import json
import logging
import sys

try:
    import click
except ImportError:
    print(
        "CLI requires 'click' package. Install with: pip install pyad2[cli]",
        file=sys.stderr,
    )
    sys.exit(1)

import pyad2


def _source_config(tcp, port, serial_port, baud_rate) -> dict:
    if not tcp and not serial_port:
        click.echo("Error: --tcp or --serial is required", err=True)
        sys.exit(1)
    if tcp:
        return {'tcp': tcp, 'port': port}
    return {'serial': serial_port, 'baud_rate': baud_rate}


def _connection_options(f):
    f = click.option('--baud-rate', default=115200, type=int, help='Serial baud rate')(f)
    f = click.option('--serial', 'serial_port', help='Serial port (e.g. /dev/ttyAMA0, COM3)')(f)
    f = click.option('--port', default=10000, type=int, help='TCP port')(f)
    f = click.option('--tcp', help='ser2sock host (e.g. 192.168.1.100)')(f)
    return f


@click.group()
@click.version_option(pyad2.__version__)
def main():
    """pyad2: AlarmDecoder keypad protocol decoder."""
    logging.basicConfig(level=logging.INFO, format='%(levelname)s: %(message)s')


@main.command()
@_connection_options
def observe(tcp, port, serial_port, baud_rate):
    """Stream parsed keypad messages as JSON (one object per line)."""
    source_config = _source_config(tcp, port, serial_port, baud_rate)

    def print_message(message):
        click.echo(json.dumps(message.to_dict()))

    try:
        pyad2.observe(source_config=source_config, callback=print_message)
    except KeyboardInterrupt:
        pass


@main.command()
@click.argument('capture', type=click.File('r'), default='-')
def parse(capture):
    """Decode captured keypad lines from a file (or stdin)."""
    for line in capture:
        line = line.rstrip('\r\n')
        if not line:
            continue
        try:
            message = pyad2.parse_line(line)
        except pyad2.ParseError as e:
            click.echo(f"Skipping line ({e.kind.value}): {e}", err=True)
            continue
        click.echo(json.dumps(message.to_dict()))


@main.command()
@click.argument('keys', required=False)
@click.option('--arm-away', is_flag=True, help='Quick-arm AWAY')
@click.option('--arm-home', is_flag=True, help='Quick-arm STAY')
@click.option('--disarm', 'code', metavar='CODE', help='Disarm with a 4-digit user code')
@_connection_options
def send(keys, arm_away, arm_home, code, tcp, port, serial_port, baud_rate):
    """Send keypad KEYS (digits, '*', '#') or an arm/disarm command to the panel."""
    chosen = [c for c in (keys is not None, arm_away, arm_home, code is not None) if c]
    if len(chosen) != 1:
        raise click.UsageError(
            "Give exactly one of KEYS, --arm-away, --arm-home or --disarm"
        )

    if arm_away:
        data = pyad2.commands.arm_away()
    elif arm_home:
        data = pyad2.commands.arm_home()
    elif code is not None:
        try:
            data = pyad2.commands.disarm(code)
        except ValueError as e:
            raise click.BadParameter(str(e), param_hint='--disarm')
    else:
        try:
            data = pyad2.commands.keys(keys)
        except ValueError as e:
            raise click.BadParameter(str(e), param_hint='KEYS')

    source_config = _source_config(tcp, port, serial_port, baud_rate)
    with pyad2.open_decoder(source_config) as decoder:
        decoder.write_raw(data)


@main.command('list-serial-ports')
def list_serial_ports():
    """List available serial ports."""
    try:
        import serial.tools.list_ports
        ports = list(serial.tools.list_ports.comports())
        if not ports:
            click.echo("No serial ports detected.")
        for p in sorted(ports, key=lambda x: x.device):
            click.echo(f"  --serial {p.device}")
            if p.description and p.description != 'n/a':
                click.echo(f"    {p.description}")
    except ImportError:
        click.echo(
            "pyserial not installed. Install with: pip install pyad2[serial]",
            err=True,
        )
