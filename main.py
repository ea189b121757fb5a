#This file is for development purposes only

import logging

from jira_project_client import JiraError, get_client
from jira_project_interface import CallOptions


def main():
    logging.basicConfig(level=logging.DEBUG, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    client = get_client(interactive=True)

    print("\nFetching projects...")
    try:
        projects = client.get_all_projects()
        for project in projects:
            print(f"- {project.get('key')}: {project.get('name')}")
    except JiraError as e:
        print(f"Error connecting to Jira: {e}")
        return

    if projects:
        key = projects[0]["key"]
        # callback style: called as callback(error, response, body)
        def show(error, response, body):
            if error:
                print(f"Error fetching {key}: {error}")
            else:
                print(f"- {key} versions: {[v.get('name') for v in body]}")

        client.get_project_versions(CallOptions(key), show)

if __name__ == "__main__":
    main()
