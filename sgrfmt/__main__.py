# -----------------------------------------------------------------------------
# es7s/sgrfmt [SGR escape sequences for format strings]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from .app import App


def main():
    App().run()


if __name__ == '__main__':
    main()
