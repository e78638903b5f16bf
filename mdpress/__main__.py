from .cli import mdpress

if __name__ == "__main__":
    mdpress(prog_name="mdpress")
