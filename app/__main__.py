# -*- coding: utf-8 -*-
import uvicorn

from app import config


def main():
    uvicorn.run("app.main:app", host=config.HOST, port=config.PORT)


if __name__ == "__main__":
    main()
