"""Interface en ligne de commande Typer de bcmirror."""
