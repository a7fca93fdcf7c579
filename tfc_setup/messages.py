"""Text shown to the user during setup."""

BANNER = r"""
--------------------------------------------------------------------------
                                         -
Welcome to Terraform Cloud               -----                           -
                                         ---------                      --
                                         ---------  -                -----
                                          ---------  ------        -------
                                            -------  ---------  ----------
                                               ----  ---------- ----------
                                                 --  ---------- ----------
                                                  -  ---------- -------
                                                     ---  ----- ---
                                                     --------   -
                                                     ----------
                                                     ----------
                                                      ---------
                                                          -----
                                                              -

-------------------------------------------------------------------------
"""

INTRODUCTION = """\
Terraform Cloud offers secure, easy-to-use remote state management and allows
you to run Terraform remotely in a controlled environment. Terraform Cloud runs
can be performed on demand or triggered automatically by various events."""

GETTING_STARTED = """\
This script will set up everything you need to get started. You'll be
applying some example infrastructure - for free - in less than a minute."""

PRIOR_RUN_WARNING = """\
It looks like you've run this script before! Before continuing, we'll need to
reset everything to its original state, including any changes you've made to {config_file}."""

PAUSE_PROMPT = "Press any key to continue (ctrl-c to quit):"
INTERRUPT_WARNING = "Really quit? Hit ctrl-c again to confirm."
GOODBYE = "Goodbye!"

REMOTE_PLAN_NOTE = """\
This plan was initiated from your local machine, but executed within
Terraform Cloud!

Terraform Cloud runs Terraform on disposable virtual machines in
its own cloud infrastructure. This 'remote execution' helps provide consistency
and visibility for critical provisioning operations. It also enables notifications,
version control integration, and powerful features like Sentinel policy enforcement
and cost estimation (shown in the output above)."""

TRIAL_NOTE = """\
The organization we created here has a 30-day free trial of the Team &
Governance tier features. After the trial ends, you'll be moved to the Free tier."""

SUMMARY = """\
You now have:

  * Workspaces for organizing your infrastructure. Terraform Cloud manages
    infrastructure collections with workspaces instead of directories. You
    can view your workspace here:
    {workspace_url}
  * Remote state management, with the ability to share outputs across
    workspaces. We've set up state management for you in your current
    workspace, and you can reference state from other workspaces using
    the 'terraform_remote_state' data source.
  * Much more!"""


def workspace_url(host: str, organization_name: str, workspace_name: str) -> str:
    return f"https://{host}/app/{organization_name}/workspaces/{workspace_name}"


def fake_services_url(host: str) -> str:
    return f"https://{host}/fake-web-services"
