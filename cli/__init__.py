"""
MintMe 명령줄 도구

실행 방법:
    python -m cli.place_order --base=LAGX --quote=MINTME --price=5 --amount=12.33 --action=buy
    python -m cli.fetch_orders --offset=0 --limit=20
    python -m cli.fetch_orders --finished
    python -m cli.fetch_assets
"""
